"""LLM gateway client for the chat advisor and structured insights"""

import asyncio
import json
from typing import Any, AsyncIterator, Dict, List

import httpx

from loanwise.config import settings
from loanwise.domain.exceptions import LLMCreditsExhaustedError, LLMGatewayError, LLMRateLimitError
from loanwise.domain.insights import MLPredictions
from loanwise.infrastructure.observability.metrics import llm_failure_counter, llm_latency_histogram
from loanwise.utils.sse import SSEFrameParser

ADVISOR_PROMPT = (
    "You are LoanWise, a personal finance advisor focused on loan repayment. "
    "Answer using the user's financial data below. Be concise and use the user's currency (₹).\n\n"
    "Financial data:\n{context}"
)

INSIGHTS_PROMPT = (
    "You are a financial analysis engine. Given a user's financial data, return predictions "
    "using the provided tool: default risk probability (0-100), an estimated CIBIL-equivalent "
    "credit score (300-900), an optimal repayment allocation across loans, and anomalies in "
    "expenses, debt, savings or income. Use the actual numbers provided."
)

INSIGHTS_TOOL = "return_ml_predictions"


class LLMClient:
    """Client for an OpenAI-compatible chat completions gateway"""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.llm_gateway_url
        self.api_key = api_key if api_key is not None else settings.llm_api_key
        self.model = model or settings.llm_model
        self.timeout = timeout or settings.http_timeout_seconds
        self.max_retries = settings.llm_max_retries
        self.backoff_base = settings.llm_backoff_base
        self.transport = transport

    @property
    def completions_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/v1/chat/completions"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            headers={"Authorization": f"Bearer {self.api_key}"},
        )

    async def stream_chat(
        self,
        messages: List[Dict[str, str]],
        context: Dict[str, Any],
    ) -> AsyncIterator[str]:
        """
        Stream the advisor's reply as text deltas.

        The conversation history is sent after a system message embedding the
        financial context snapshot. Streams are not retried; a failure ends
        the generator with an LLMGatewayError and the caller resends.

        Raises:
            LLMRateLimitError, LLMCreditsExhaustedError, LLMGatewayError
        """
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": ADVISOR_PROMPT.format(context=json.dumps(context, indent=2))},
                *messages,
            ],
            "stream": True,
        }
        parser = SSEFrameParser()

        async with self._client() as client:
            try:
                with llm_latency_histogram.labels(operation="chat").time():
                    async with client.stream("POST", self.completions_url, json=payload) as response:
                        if response.is_error:
                            await response.aread()
                            raise self._status_error(response)

                        async for chunk in response.aiter_text():
                            for delta in parser.feed(chunk):
                                yield delta
                            if parser.done:
                                break

                        for delta in parser.flush():
                            yield delta

            except httpx.TimeoutException as e:
                llm_failure_counter.labels(reason="network").inc()
                raise LLMGatewayError(f"LLM gateway timeout after {self.timeout}s") from e
            except httpx.RequestError as e:
                llm_failure_counter.labels(reason="network").inc()
                raise LLMGatewayError(f"LLM gateway unreachable: {e}") from e

    async def get_insights(self, context: Dict[str, Any]) -> MLPredictions:
        """
        Fetch structured predictions for a financial context snapshot.

        Retry strategy:
        - Exponential backoff: 1s, 2s, 4s (base * 2^(attempt-1))
        - Retries on 5xx errors and network failures
        - 429/402 and other 4xx errors are raised immediately

        Raises:
            LLMRateLimitError, LLMCreditsExhaustedError, LLMGatewayError
        """
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": INSIGHTS_PROMPT},
                {
                    "role": "user",
                    "content": f"Analyze this financial profile and return ML predictions:\n{json.dumps(context, indent=2)}",
                },
            ],
            "tools": [
                {
                    "type": "function",
                    "function": {
                        "name": INSIGHTS_TOOL,
                        "description": "Return structured ML prediction results for the financial profile",
                        "parameters": MLPredictions.model_json_schema(by_alias=True),
                    },
                }
            ],
            "tool_choice": {"type": "function", "function": {"name": INSIGHTS_TOOL}},
        }

        attempt = 0
        async with self._client() as client:
            while True:
                try:
                    with llm_latency_histogram.labels(operation="insights").time():
                        response = await client.post(self.completions_url, json=payload)
                        response.raise_for_status()
                    return self._parse_predictions(response)

                except httpx.HTTPStatusError as e:
                    attempt += 1
                    error = self._status_error(e.response)
                    if e.response.status_code < 500 or attempt >= self.max_retries:
                        raise error from e

                except httpx.RequestError as e:
                    attempt += 1
                    llm_failure_counter.labels(reason="network").inc()
                    if attempt >= self.max_retries:
                        raise LLMGatewayError(f"LLM gateway unreachable: {e}") from e

                backoff = self.backoff_base * (2 ** (attempt - 1))
                await asyncio.sleep(backoff)

    def _status_error(self, response: httpx.Response) -> LLMGatewayError:
        status = response.status_code
        if status == 429:
            llm_failure_counter.labels(reason="rate_limited").inc()
            return LLMRateLimitError("Rate limit exceeded. Please try again later.", status)
        if status == 402:
            llm_failure_counter.labels(reason="credits_exhausted").inc()
            return LLMCreditsExhaustedError("AI usage limit reached. Please add credits.", status)

        llm_failure_counter.labels(reason="http_error").inc()
        return LLMGatewayError(f"LLM gateway error: {status}", status)

    def _parse_predictions(self, response: httpx.Response) -> MLPredictions:
        try:
            tool_call = response.json()["choices"][0]["message"]["tool_calls"][0]
            arguments = json.loads(tool_call["function"]["arguments"])
            return MLPredictions.model_validate(arguments)
        except (KeyError, IndexError, TypeError, ValueError) as e:
            llm_failure_counter.labels(reason="invalid_response").inc()
            raise LLMGatewayError(f"Invalid prediction payload from LLM gateway: {e}") from e
