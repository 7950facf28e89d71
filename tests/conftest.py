import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import namefully
sys.path.insert(0, str(Path(__file__).parent.parent))

from namefully.config import get_registry


@pytest.fixture(autouse=True)
def fresh_registry():
    """Every test starts from an empty configuration registry."""
    get_registry().clear()
    yield get_registry()
    get_registry().clear()
