from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from PsQ_Census import run_census
from PsQ_Enumerator import CompletionEnumerator
from PsQ_Grid import Grid
from PsQ_Symmetry import GeometryGroup, LabelGroup


# rows [1,2,3,4], [3,4,1,2], [2,1,4,3], [4,3,2,1]
SAMPLE = "1234341221434321"


@pytest.fixture(scope="session")
def geos() -> GeometryGroup:
    return GeometryGroup()


@pytest.fixture(scope="session")
def perms() -> LabelGroup:
    return LabelGroup()


@pytest.fixture(scope="session")
def solutions():
    return CompletionEnumerator().enumerate()


@pytest.fixture(scope="session")
def census():
    return run_census()


@pytest.fixture
def sample_grid() -> Grid:
    return Grid.from_grid(SAMPLE, automatic_check=True)
