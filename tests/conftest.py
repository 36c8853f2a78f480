from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from summify.api import create_app
from summify.config import ApiSettings, LoggingSettings, Settings


ANIMALS = "Cats are great. Dogs are great too. Birds can fly. Fish can swim."


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        api=ApiSettings(max_text_chars=5_000, max_upload_bytes=64 * 1024),
        logging=LoggingSettings(log_dir=str(tmp_path / "logs")),
    )


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))
