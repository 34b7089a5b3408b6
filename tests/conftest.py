import pytest
from loguru import logger

from logging_middleware.logging import client


@pytest.fixture
def access_token(monkeypatch):
    monkeypatch.setattr(client, "ACCESS_TOKEN", "test-token-123")
    return "test-token-123"


@pytest.fixture
def diagnostics():
    """Collect (level, message) pairs emitted through loguru."""
    records = []
    handler_id = logger.add(
        lambda msg: records.append((msg.record["level"].name, msg.record["message"])),
        level="DEBUG",
        format="{message}",
    )
    yield records
    logger.remove(handler_id)
