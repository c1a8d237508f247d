from __future__ import annotations

import sys
from pathlib import Path

import pytest

from src.sessions import SessionController
from tests.helpers import FakeModel, SentMessages, FakeGenerator


def pytest_configure() -> None:
    # Keep `import src...` working when running `pytest` from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


@pytest.fixture
def sent() -> SentMessages:
    return SentMessages()


@pytest.fixture
def model() -> FakeModel:
    return FakeModel(gated=True)


@pytest.fixture
def session(sent: SentMessages, model: FakeModel) -> SessionController:
    return SessionController(session_id="s-1", send=sent, generator=FakeGenerator(model))
