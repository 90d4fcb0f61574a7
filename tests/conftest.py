"""Shared test fixtures for FuelBhai."""

import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unit tests must never reach a real provider or Secrets Manager
for var in ("EMAIL_API_KEY", "EMAIL_API_KEY_SECRET_ARN", "AWS_PROFILE"):
    os.environ.pop(var, None)

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_config_cache():
    from core.config import _reset_config

    _reset_config()
    yield
    _reset_config()


@pytest.fixture
def local_platform():
    from core.foreground.platform import LocalHostPlatform

    return LocalHostPlatform(sdk_int=34)


@pytest.fixture
def mock_provider():
    provider = MagicMock()
    provider.send = AsyncMock(return_value="msg_123")
    return provider


@pytest.fixture
def valid_body():
    return {"email": "a@b.com", "code": "123456", "name": "Asha"}
