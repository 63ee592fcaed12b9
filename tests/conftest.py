"""
Global pytest configuration and fixtures for the Freshdesk client tests.

This file contains shared fixtures and configurations that are available
to all test modules without explicit import.
"""

import os
import sys
from pathlib import Path
from typing import AsyncGenerator, Dict, Generator

import pytest  # type: ignore
import pytest_asyncio  # type: ignore
from faker import Faker  # type: ignore

# Add the project root to Python path
project_root: Path = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from freshdesk_api.config.settings import reset_settings  # noqa: E402
from freshdesk_api.sources.client.freshdesk.freshdesk import FreshDeskClient  # noqa: E402
from freshdesk_api.sources.client.freshdesk.request_translator import RequestTranslator  # noqa: E402
from freshdesk_api.sources.client.http.http_client import HTTPClient  # noqa: E402
from tests.fixtures.http_fixtures import (  # noqa: E402
    TEST_API_KEY,
    TEST_DOMAIN,
    RecordingTransport,
    json_response,
)

# Initialize Faker for generating test data
fake: Faker = Faker()


# ============================================================================
# Session-level fixtures
# ============================================================================


@pytest.fixture(scope="session")
def faker_instance() -> Faker:
    """
    Provide a Faker instance for generating test data.

    Returns:
        Configured Faker instance
    """
    return fake


# ============================================================================
# Function-level fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """
    Reset environment and settings state around each test.
    This ensures tests don't interfere with each other.
    """
    original_env: Dict[str, str] = os.environ.copy()
    reset_settings()

    yield

    os.environ.clear()
    os.environ.update(original_env)
    reset_settings()


@pytest.fixture
def transport() -> RecordingTransport:
    """
    Provide a recording mock transport answering 200 with an empty JSON object.

    Tests replace the answer through `transport.respond_with(...)`.
    """
    return RecordingTransport(lambda request: json_response(200, {}))


@pytest_asyncio.fixture
async def translator(transport: RecordingTransport) -> AsyncGenerator[RequestTranslator, None]:
    """
    Provide a RequestTranslator whose HTTP client talks to the mock transport.
    """
    translator = RequestTranslator(HTTPClient(transport=transport.mock))
    yield translator
    await translator.close()


@pytest_asyncio.fixture
async def freshdesk_client(transport: RecordingTransport) -> AsyncGenerator[FreshDeskClient, None]:
    """
    Provide a FreshDeskClient for the test domain backed by the mock transport.
    """
    client = FreshDeskClient.build_with_api_key(TEST_DOMAIN, TEST_API_KEY, transport=transport.mock)
    yield client
    await client.close()


# ============================================================================
# Test lifecycle hooks
# ============================================================================


def pytest_collection_modifyitems(config, items):
    """
    Modify test items after collection.

    Tests under tests/unit are marked `unit`.
    """
    for item in items:
        if "unit" in Path(str(item.fspath)).parts:
            item.add_marker(pytest.mark.unit)
