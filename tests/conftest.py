# conftest.py
import pytest

from pinecone_client.config import Settings
from tests.fakes import RecordingTransport


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        pinecone_api_key="test-key",
        pinecone_environment="us-west1-gcp",
        pinecone_project_name="abc123",
        pinecone_index_name="movies",
        _env_file=None,  # pyright: ignore[reportCallIssue]
    )


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()
