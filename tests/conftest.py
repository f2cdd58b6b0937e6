"""
Shared pytest fixtures and configuration.
"""
import pytest
from unittest.mock import AsyncMock

from app.main import app
from app.api.dependencies import get_transcript_service
from app.core.providers.transcript_provider import TranscriptProvider
from app.models import CaptionSnippet, VideoDetails
from app.services.proxy import ProxyService
from app.services.transcript import TranscriptService


@pytest.fixture
def sample_captions():
    """Caption units as the provider would return them."""
    return [CaptionSnippet(text=">> hi", start=5.0, duration=2.0)]


@pytest.fixture
def sample_details():
    """Video metadata as the provider would return it."""
    return VideoDetails(title="T", author="A", view_count="2500000")


@pytest.fixture
def mock_provider(sample_captions, sample_details):
    """Create a mock TranscriptProvider returning the sample data."""
    provider = AsyncMock(spec=TranscriptProvider)
    provider.fetch_transcript.return_value = sample_captions
    provider.fetch_metadata.return_value = sample_details
    return provider


@pytest.fixture
def transcript_service(mock_provider):
    """TranscriptService wired to the mock provider without a proxy."""
    return TranscriptService(provider=mock_provider, proxy_service=ProxyService(None))


@pytest.fixture
def override_dependencies(transcript_service):
    """Override FastAPI dependencies for testing."""
    def override_get_transcript_service():
        return transcript_service

    app.dependency_overrides[get_transcript_service] = override_get_transcript_service

    yield

    # Clean up
    app.dependency_overrides.clear()
