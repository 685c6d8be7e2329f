from __future__ import annotations

import asyncio
import contextlib
import logging

from fastapi import APIRouter, HTTPException, Request, Response
from starlette.concurrency import run_in_threadpool

from definition_reader.parsing import RequestError, parse

from api.dependencies import RequestDisconnectContext, get_config, get_poll_interval
from api.serializers import definitions_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/definitions", tags=["definitions"])

# nginx convention for "client closed request"
CLIENT_CLOSED_REQUEST = 499


@router.post("/{word}")
async def parse_definitions(word: str, request: Request):
    payload = await request.body()
    raw_markup = payload.decode("utf-8", errors="replace")
    if not raw_markup.strip():
        raise HTTPException(status_code=400, detail="Request body must contain the page markup")

    context = await RequestDisconnectContext.open(request, get_poll_interval())
    watcher = asyncio.create_task(context.watch())
    try:
        result = await run_in_threadpool(parse, word, raw_markup, context, get_config())
    finally:
        watcher.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await watcher

    if result is RequestError.CANCELLED_REQUEST:
        logger.info("Client went away while parsing %r", word)
        return Response(status_code=CLIENT_CLOSED_REQUEST)
    return definitions_payload(result)
