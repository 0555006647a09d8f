from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def programs_dir():
    return ROOT / "programs"


@pytest.fixture
def hello_source(programs_dir):
    return (programs_dir / "hello.bf").read_text()
