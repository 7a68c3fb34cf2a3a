"""Shared pytest fixtures for DIFFY-SETUP tests."""

import json
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from diffy_setup.config.settings import Settings
from diffy_setup.store.file_store import FileStore
from diffy_setup.store.platform import PlatformConfig
from diffy_setup.workflow.state import WorkflowState


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    """Hosting platform cache directory with an empty build-tools store."""
    path = tmp_path / "terminus-cache"
    (path / "build-tools").mkdir(parents=True)
    return path


@pytest.fixture
def build_tools_dir(cache_dir: Path) -> Path:
    return cache_dir / "build-tools"


@pytest.fixture
def store(build_tools_dir: Path) -> FileStore:
    return FileStore(build_tools_dir)


@pytest.fixture
def write_cached(build_tools_dir: Path) -> Callable[[str, object], None]:
    """Write a JSON-encoded entry the way the platform CLI does."""

    def _write(name: str, value: object) -> None:
        (build_tools_dir / name).write_text(json.dumps(value))

    return _write


@pytest.fixture
def platform_cache(write_cached) -> None:
    """Cache the GitHub token, CircleCI token and site name."""
    write_cached("u1-GITHUB_TOKEN", "gh_abc")
    write_cached("u1-CIRCLE_TOKEN", "cc_xyz")
    write_cached("u1-SITE_NAME", "mysite")


@pytest.fixture
def settings(cache_dir: Path) -> Settings:
    return Settings(terminus_cache_dir=str(cache_dir), diffy_user_id="u1")


@pytest.fixture
def platform() -> PlatformConfig:
    return PlatformConfig(github_token="gh_abc", circle_token="cc_xyz", site_name="mysite")


@pytest.fixture
def workflow_state(platform: PlatformConfig) -> WorkflowState:
    return WorkflowState(user_id="u1", platform=platform)


@pytest.fixture
def mock_http() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client]:
    """Build an httpx.Client whose requests are answered by handler."""
    clients: list[httpx.Client] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()
