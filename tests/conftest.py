from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (ROOT, SRC):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from tests.helpers import multi_angle_mpls, simple_mpls, write_mpls  # noqa: E402


@pytest.fixture
def simple_mpls_path(tmp_path: Path) -> Path:
    return write_mpls(tmp_path / "BDMV" / "PLAYLIST" / "00800.mpls", simple_mpls())


@pytest.fixture
def multi_angle_mpls_path(tmp_path: Path) -> Path:
    return write_mpls(tmp_path / "BDMV" / "PLAYLIST" / "00801.mpls", multi_angle_mpls())
