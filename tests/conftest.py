"""Shared test fixtures for sheetlocales."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from sheetlocales.transport import LocalFileTransport

GOLDEN_DIR = Path(__file__).parent / "golden"


@pytest.fixture
def golden_dir() -> Path:
    return GOLDEN_DIR


@pytest.fixture
def local_transport() -> LocalFileTransport:
    """Create a transport that reads from golden files."""
    return LocalFileTransport(GOLDEN_DIR)


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru output as "LEVEL: message" strings."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda m: messages.append(f"{m.record['level'].name}: {m.record['message']}"),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)
