"""Tests for src/core/logging.py — setup and secret redaction."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from src.core.config import reset_settings
from src.core.logging import redact_secrets, setup_logging


@pytest.fixture(autouse=True)
def _clean_settings() -> Iterator[None]:
    reset_settings()
    yield
    structlog.reset_defaults()


class TestRedactSecrets:
    def test_masks_credential_keys(self) -> None:
        event = {"event": "x", "Authorization": "Bearer abc", "token": "abc", "status": 401}
        out = redact_secrets(None, "info", event)
        assert out["Authorization"] == "**********"
        assert out["token"] == "**********"
        assert out["status"] == 401

    def test_leaves_other_keys(self) -> None:
        event = {"event": "coinbase_client_connected", "base_url": "https://api.coinbase.com"}
        assert redact_secrets(None, "info", dict(event)) == event


class TestSetupLogging:
    def test_level_override(self) -> None:
        setup_logging(level="DEBUG", fmt="console")
        assert logging.getLogger().level == logging.DEBUG

    def test_httpx_quieted(self) -> None:
        setup_logging(level="DEBUG", fmt="json")
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_single_handler(self) -> None:
        setup_logging(fmt="json")
        setup_logging(fmt="json")
        assert len(logging.getLogger().handlers) == 1
