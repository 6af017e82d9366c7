"""Incremental parser for server-sent chat completion streams"""

import json
import logging
from typing import List

logger = logging.getLogger(__name__)

DATA_PREFIX = "data: "
DONE_SENTINEL = "[DONE]"


class SSEFrameParser:
    """
    State machine turning raw stream chunks into content deltas.

    Transitions:
    - STREAMING: accumulate chunk -> split on newline -> parse or rebuffer
    - STREAMING -> DONE on a `data: [DONE]` frame
    - DONE: further input is ignored

    A `data:` line whose JSON does not decode yet is pushed back to the front
    of the buffer and retried when the next chunk arrives. Once another complete
    line is buffered behind it, the line is dropped with a warning so the
    buffer never grows beyond the frames still in flight.
    """

    STREAMING = "streaming"
    DONE = "done"

    def __init__(self):
        self.state = self.STREAMING
        self.buffer = ""

    @property
    def done(self) -> bool:
        return self.state == self.DONE

    def feed(self, chunk: str) -> List[str]:
        """Accumulate a chunk and return content from every complete frame"""
        if self.done:
            return []

        self.buffer += chunk
        deltas: List[str] = []

        while not self.done:
            newline_index = self.buffer.find("\n")
            if newline_index == -1:
                break

            line = self.buffer[:newline_index]
            self.buffer = self.buffer[newline_index + 1:]

            try:
                content = self._parse_line(line)
            except json.JSONDecodeError:
                if "\n" in self.buffer:
                    logger.warning("Dropping undecodable stream frame", extra={"frame": line[:200]})
                    continue
                self.buffer = line + "\n" + self.buffer
                break

            if content:
                deltas.append(content)

        return deltas

    def flush(self) -> List[str]:
        """Drain whatever is left once the transport has closed"""
        if self.done or not self.buffer:
            self.buffer = ""
            return []

        remaining = self.buffer
        self.buffer = ""
        deltas: List[str] = []

        for line in remaining.split("\n"):
            try:
                content = self._parse_line(line)
            except json.JSONDecodeError:
                logger.warning("Dropping undecodable stream frame", extra={"frame": line[:200]})
                continue
            if content:
                deltas.append(content)
            if self.done:
                break

        return deltas

    def _parse_line(self, line: str) -> str | None:
        if line.endswith("\r"):
            line = line[:-1]

        if not line.strip() or line.startswith(":"):
            return None
        if not line.startswith(DATA_PREFIX):
            return None

        payload = line[len(DATA_PREFIX):].strip()
        if payload == DONE_SENTINEL:
            self.state = self.DONE
            return None

        parsed = json.loads(payload)
        if not isinstance(parsed, dict):
            return None
        choices = parsed.get("choices") or [{}]
        delta = choices[0].get("delta") or {}
        return delta.get("content")
