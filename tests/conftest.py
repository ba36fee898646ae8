from __future__ import annotations

from typing import Callable

import httpx
import pytest

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def mock_client() -> Callable[[Handler], httpx.AsyncClient]:
    """Build an AsyncClient whose requests are answered by `handler`."""

    def make(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return make
