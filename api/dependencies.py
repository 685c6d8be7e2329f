from __future__ import annotations

import asyncio
import os
from functools import lru_cache
from typing import Callable, List

from fastapi import Request

from definition_reader.parsing import ParserConfig


@lru_cache(maxsize=1)
def get_config() -> ParserConfig:
    return ParserConfig.from_env()


@lru_cache(maxsize=1)
def get_poll_interval() -> float:
    return float(os.getenv("DEFINITIONS_DISCONNECT_POLL_INTERVAL", "0.05"))


@lru_cache(maxsize=1)
def get_allowed_origins() -> List[str]:
    raw = os.getenv("DEFINITIONS_CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class RequestDisconnectContext:
    """
    Adapts a Starlette request to the parser's request context: `aborted`
    reflects the state when parsing starts, and close callbacks fire once
    when `watch()` sees the client disconnect.
    """

    def __init__(self, request: Request, poll_interval: float = 0.05):
        self.request = request
        self.poll_interval = poll_interval
        self.aborted = False
        self._callbacks: List[Callable[[], None]] = []
        self._closed = False

    @classmethod
    async def open(cls, request: Request, poll_interval: float = 0.05) -> "RequestDisconnectContext":
        context = cls(request, poll_interval)
        context.aborted = await request.is_disconnected()
        return context

    def on_close(self, callback: Callable[[], None]) -> None:
        self._callbacks.append(callback)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        for callback in self._callbacks:
            callback()

    async def watch(self) -> None:
        while not self._closed:
            if await self.request.is_disconnected():
                self.close()
                return
            await asyncio.sleep(self.poll_interval)
