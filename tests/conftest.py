from pathlib import Path

import pytest


PROGRAMS_DIR = Path(__file__).resolve().parent / "programs"


@pytest.fixture
def read_program():
    def _read(name: str) -> str:
        return (PROGRAMS_DIR / name).read_text(encoding="utf-8")

    return _read
