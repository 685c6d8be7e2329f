from typing import Callable, List

import pytest


class FakeRequest:
    """
    Stand-in for the inbound request: an `aborted` flag plus close callbacks
    the test can fire on demand.
    """

    def __init__(self, aborted: bool = False):
        self.aborted = aborted
        self.callbacks: List[Callable[[], None]] = []

    def on_close(self, callback: Callable[[], None]) -> None:
        self.callbacks.append(callback)

    def close(self) -> None:
        for callback in self.callbacks:
            callback()


@pytest.fixture
def request_context():
    return FakeRequest()


@pytest.fixture
def aborted_request():
    return FakeRequest(aborted=True)
