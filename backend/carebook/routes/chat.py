import logging
import time
import uuid

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..roster import get_roster
from ..schemas import ChatRequest
from ..services.intent import classify
from ..services.responder import generate

router = APIRouter()
logger = logging.getLogger(__name__)

APOLOGY = "I apologize, but I encountered an error. Please try again."


@router.post("/chat")
async def chat(request: Request) -> JSONResponse:
    # The body is parsed by hand so malformed input gets the apology, not a 422.
    request_id = uuid.uuid4().hex
    start = time.perf_counter()
    try:
        payload = ChatRequest.model_validate(await request.json())
        roster = get_roster()
        result = classify(payload.message, roster)
        response = generate(
            result.intent, result.details, payload.appointments or [], roster
        )
    except Exception:
        logger.exception("chat_error request_id=%s", request_id)
        return JSONResponse(status_code=500, content={"reply": APOLOGY})

    logger.info(
        "chat_request request_id=%s intent=%s action=%s latency_ms=%s",
        request_id,
        result.intent,
        response.action,
        int((time.perf_counter() - start) * 1000),
    )
    return JSONResponse(content=response.model_dump(by_alias=True, exclude_none=True))
