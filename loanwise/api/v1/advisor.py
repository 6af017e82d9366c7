"""POST /v1/advisor/{user_id}/... - LLM-backed chat assistant and insights"""

import json
import logging
from typing import AsyncIterator
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import StreamingResponse

from loanwise.api.v1.schemas import ChatRequest
from loanwise.api.dependencies import ResolvedProfile, get_llm_client, get_profile, get_request_id
from loanwise.domain.context import build_financial_context
from loanwise.domain.exceptions import LLMCreditsExhaustedError, LLMGatewayError, LLMRateLimitError
from loanwise.domain.insights import MLPredictions
from loanwise.infrastructure.clients.llm import LLMClient

router = APIRouter()


def _sse_frame(payload: dict | str) -> str:
    data = payload if isinstance(payload, str) else json.dumps(payload)
    return f"data: {data}\n\n"


@router.post("/advisor/{user_id}/chat")
async def chat(
    request_body: ChatRequest,
    request: Request,
    resolved: ResolvedProfile = Depends(get_profile),
    llm_client: LLMClient = Depends(get_llm_client),
):
    """
    Stream the advisor's reply as server-sent events.

    Frames:
    - data: {"content": "..."}  text delta
    - data: {"error": "...", "retryable": true}  gateway failure; resend the conversation
    - data: [DONE]  end of reply
    """
    request_id = get_request_id(request)
    context = build_financial_context(resolved.profile)
    messages = [message.model_dump() for message in request_body.messages]

    async def event_stream() -> AsyncIterator[str]:
        try:
            async for delta in llm_client.stream_chat(messages, context):
                yield _sse_frame({"content": delta})
        except LLMGatewayError as e:
            logging.error(f"Advisor chat failed: {e}", extra={"request_id": request_id, "user_id": resolved.user_id})
            yield _sse_frame({"error": str(e), "retryable": e.retryable})
        yield _sse_frame("[DONE]")

    return StreamingResponse(event_stream(), media_type="text/event-stream")


@router.post("/advisor/{user_id}/insights", response_model=MLPredictions)
async def get_insights(
    request: Request,
    resolved: ResolvedProfile = Depends(get_profile),
    llm_client: LLMClient = Depends(get_llm_client),
):
    """
    Structured predictions (default risk, credit score, repayment advice, anomalies).

    Returns:
        MLPredictions document produced by the LLM gateway
    """
    request_id = get_request_id(request)

    try:
        return await llm_client.get_insights(build_financial_context(resolved.profile))

    except LLMRateLimitError as e:
        logging.warning(f"Insights rate limited: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=429, detail=str(e))

    except LLMCreditsExhaustedError as e:
        logging.warning(f"Insights credits exhausted: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=402, detail=str(e))

    except LLMGatewayError as e:
        logging.error(f"LLM gateway error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Insights service unavailable")
