"""
Pytest configuration file for the utmgrs tests.
"""
import sys
from pathlib import Path

import pytest

# Add the project root to Python path so we can import utmgrs modules
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from utmgrs import UTMGlobe  # noqa: E402


@pytest.fixture(scope="session")
def globe():
    """A private globe so tests never depend on the shared default."""
    return UTMGlobe()


@pytest.fixture
def sample_points():
    """(lat, lon, zone) triples spread over both hemispheres and the irregular zones."""
    return [
        (0.0, 0.0, "31N"),
        (0.0, 3.0, "31N"),
        (48.8566, 2.3522, "31U"),
        (51.4779, -0.0015, "30U"),
        (-33.8688, 151.2093, "56H"),
        (-54.8019, -68.3030, "19F"),
        (60.3913, 5.3221, "32V"),
        (59.9, 2.5, "31V"),
        (78.2232, 15.6267, "33X"),
        (79.0, 5.0, "31X"),
        (80.0, 40.0, "37X"),
        (40.7128, -74.0060, "18T"),
        (35.6762, 139.6503, "54S"),
    ]
