#!/usr/bin/env python3
"""
app.py - FastAPI web API for the professor recommendation chatbot
"""

from typing import List
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, StreamingResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
import os
from config import CONFIG, log_message
from exceptions import ProfessorBotError, UpstreamError
from models import Message
from synthesizer import ProfessorSynthesizer

limiter = Limiter(key_func=get_remote_address)

app = FastAPI(
    title="Rate My Professor Assistant API",
    description="Retrieval-augmented professor recommendations with streamed answers",
    version="1.0.0"
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation failed",
            "errors": jsonable_encoder(exc.errors()),
            "message": "Request body must be a JSON array of chat messages"
        }
    )


def get_synthesizer_factory():
    """Each request builds its own clients; nothing is shared between requests"""
    return ProfessorSynthesizer


@app.post("/api/chat")
@limiter.limit(CONFIG["rate_limit"])
async def chat(request: Request, messages: List[Message],
               synthesizer_factory=Depends(get_synthesizer_factory)):
    """
    Stream an answer to the newest message in the chat history

    - **body**: the full conversation, oldest first, ending with the user's question
    """
    try:
        synthesizer = synthesizer_factory()
        stream = await synthesizer.process_query(messages)
    except UpstreamError as e:
        log_message(f"{e.service} service failed before streaming: {e}", "ERROR")
        return JSONResponse(status_code=500, content={"error": str(e)})
    except ProfessorBotError as e:
        log_message(f"Error handling chat request: {e}", "ERROR")
        return JSONResponse(status_code=500, content={"error": str(e)})
    except Exception as e:
        log_message(f"Unexpected error handling chat request: {e!r}", "ERROR")
        return JSONResponse(status_code=500, content={"error": str(e)})

    return StreamingResponse(stream, media_type="text/plain; charset=utf-8")


if __name__ == "__main__":
    import uvicorn
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("app:app", host="0.0.0.0", port=port)
