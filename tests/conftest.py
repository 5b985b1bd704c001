from pathlib import Path
from typing import Generator

import pytest

from restbind import Config, Endpoint, Session
from tests.utils.models import User


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from RESTBIND_* variables and any local .env file."""
    for name in (
        "RESTBIND_TIMEOUT",
        "RESTBIND_FOLLOW_REDIRECTS",
        "RESTBIND_VERIFY_SSL",
        "RESTBIND_RAISE_FOR_STATUS",
        "RESTBIND_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def host() -> str:
    return "api.example.com"


@pytest.fixture
def base_url(host: str) -> str:
    return f"https://{host}"


@pytest.fixture
def config() -> Config:
    return Config(timeout=5.0)


@pytest.fixture
def session(config: Config) -> Generator[Session, None, None]:
    session = Session(config)
    yield session
    session.close()


@pytest.fixture
def user_endpoint(host: str) -> Endpoint[User]:
    return Endpoint(host=host, path="/users/1", response_type=User)
