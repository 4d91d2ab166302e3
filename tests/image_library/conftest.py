import httpx
import pytest

from library_stub import create_stub_library


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def stub_transport():
    return httpx.ASGITransport(app=create_stub_library())
