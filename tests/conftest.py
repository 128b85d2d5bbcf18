import sys
from pathlib import Path

import numpy as np
import pytest

# Make the flat layout importable without installing
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pcn.datasets import logic_gate


@pytest.fixture
def and_gate():
    return logic_gate('AND')


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
