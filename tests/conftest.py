import os

# benchmark.py imports pyplot at module level
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from models import FunctionalDependency


@pytest.fixture
def fd():
    """Build a dependency from 'AB' / 'C' style strings"""
    def make(determinant: str, dependent: str) -> FunctionalDependency:
        return FunctionalDependency(tuple(determinant), tuple(dependent))
    return make
