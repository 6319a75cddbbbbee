from pathlib import Path

import pytest
from click.testing import CliRunner

from minihttpie._config import Config
from minihttpie._utils.constants import (
    ENV_CA_BUNDLE_VARS,
    ENV_CA_DIR,
    ENV_DEFAULT_BODY_MODE,
    ENV_FOLLOW_REDIRECTS,
    ENV_TIMEOUT,
    ENV_VERIFY_SSL,
)


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Clean environment variables and run away from any local .env file."""
    for name in (
        ENV_TIMEOUT,
        ENV_DEFAULT_BODY_MODE,
        ENV_FOLLOW_REDIRECTS,
        ENV_VERIFY_SSL,
        ENV_CA_DIR,
        *ENV_CA_BUNDLE_VARS,
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def config() -> Config:
    return Config(timeout=5.0)


@pytest.fixture
def base_url() -> str:
    return "http://httpbin.org"
