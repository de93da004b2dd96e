import pytest
from pathlib import Path
from common.models import FuelComposition

REPO_ROOT = Path(__file__).resolve().parents[1]

@pytest.fixture
def sample_fuel():
    # ultimate analysis used throughout the reference run
    return FuelComposition(hydrogen=3.2, carbon=54.4, sulfur=2.3, nitrogen=1.0,
                           oxygen=3.1, water=20.0, ash=16.0)

@pytest.fixture
def repo_root():
    return REPO_ROOT

def make_fuel(**over):
    base = dict(hydrogen=4.0, carbon=60.0, sulfur=1.0, nitrogen=1.0,
                oxygen=5.0, water=10.0, ash=10.0)
    base.update(over)
    return FuelComposition(**base)
