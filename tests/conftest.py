from __future__ import annotations

from pathlib import Path

import pytest

from envstore import Environment

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_content() -> str:
    return (FIXTURES / "sample.env").read_text(encoding="utf-8")


@pytest.fixture
def environment(sample_content: str) -> Environment:
    env = Environment()
    env.load(content=sample_content)
    return env
