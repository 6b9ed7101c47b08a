from __future__ import annotations

import pytest

from fakes import BUSINESS, IDENTITY


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def identity() -> dict[str, str]:
    return dict(IDENTITY)


@pytest.fixture
def business() -> dict[str, object]:
    return dict(BUSINESS)
