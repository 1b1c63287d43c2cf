import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `import textslides` works
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from textslides.config import LayoutConfig  # noqa: E402


SAMPLE_MARKUP = """#Quarterly Review
--
Revenue grew in every region
and margins held steady.
--[North, South, East, West]
---
#Next Steps
--
Hire two engineers
--
Ship the beta
"""


@pytest.fixture
def sample_markup():
    return SAMPLE_MARKUP


@pytest.fixture
def default_config():
    return LayoutConfig()
