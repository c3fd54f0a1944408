import sys
import os

import pytest

# Make the shared sample tables importable as ``samples``
tests_dir = os.path.dirname(os.path.abspath(__file__))
if tests_dir not in sys.path:
    sys.path.insert(0, tests_dir)

# Add the project root to sys.path
project_root = os.path.dirname(tests_dir)
if project_root not in sys.path:
    sys.path.insert(0, project_root)


@pytest.fixture
def rng():
    import numpy as np
    return np.random.default_rng(20240611)
