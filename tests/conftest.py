"""
Shared fixtures for projection engine and API testing.
"""

import sys
import os
import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from retirement_projection.models import Inputs
from retirement_projection.database import make_engine
from retirement_projection.encrypted_database import EncryptionManager, generate_new_key
from retirement_projection.settings_store import SettingsStore


@pytest.fixture
def household_inputs():
    """Mid-career household with giving enabled and no college costs."""
    return {
        "portfolioValue": 250000,
        "netJobIncome": 120000,
        "monthlyInvestment": 1500,
        "passiveIncome": 12000,
        "spendingNeed": 80000,
        "initialAge": 35,
        "retirementAge": 60,
        "maxAge": 90,
        "inflationRate": 0.03,
        "annualGrowthRate": 0.06,
        "charitableGivingEnabled": True,
        "collegeCostsEnabled": False,
        "numKids": 2,
        "collegeCost": 50000,
        "collegeStartAge": 0,
        "collegeEndAge": 0,
        "collegeDuration": 4,
    }


@pytest.fixture
def college_inputs(household_inputs):
    """Two kids in college between parent ages 50 and 55."""
    return {
        **household_inputs,
        "collegeCostsEnabled": True,
        "numKids": 2,
        "collegeCost": 50000,
        "collegeDuration": 4,
        "collegeStartAge": 50,
        "collegeEndAge": 55,
    }


@pytest.fixture
def make_inputs():
    """Factory fixture for building validated Inputs with overrides."""
    def _make(base=None, **overrides):
        data = dict(base or {})
        data.update(overrides)
        return Inputs(**data)
    return _make


@pytest.fixture
def tolerance():
    """Tolerance for floating-point identities."""
    return 1e-9


@pytest.fixture
def db_engine(tmp_path):
    """SQLAlchemy engine on a throwaway sqlite file."""
    return make_engine(f"sqlite:///{tmp_path / 'settings.db'}")


@pytest.fixture
def encryption():
    """Encryption manager with a fresh random key."""
    return EncryptionManager(key=generate_new_key().encode(), enabled=True)


@pytest.fixture
def settings_store(db_engine, encryption):
    return SettingsStore(engine=db_engine, encryption=encryption)
