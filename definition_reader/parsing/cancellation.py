from __future__ import annotations

import threading
from typing import Callable, Protocol


class RequestContext(Protocol):
    """
    Minimal view of the inbound request: whether it was already aborted when
    parsing starts, and a hook fired at most once when the connection closes.
    """

    aborted: bool

    def on_close(self, callback: Callable[[], None]) -> None:
        ...


class CancellationToken:
    """
    One-shot cancellation flag shared by every pipeline stage. Safe to flip
    from another thread or the event loop while the pipeline is running.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    @classmethod
    def from_request(cls, context: RequestContext) -> "CancellationToken":
        token = cls()
        if context.aborted:
            token.cancel()
        context.on_close(token.cancel)
        return token

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()
