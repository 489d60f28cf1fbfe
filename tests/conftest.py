import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path to allow `import pricing`, `import models`, etc.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tests.factories import make_settings  # noqa: E402


@pytest.fixture
def settings():
    """Store settings at 450 display units per USD with a 500 delivery fee."""
    return make_settings("450", delivery_fee="500")
