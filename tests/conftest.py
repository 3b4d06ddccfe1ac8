# tests/conftest.py
import pytest

from backend import api
from matcher.analyzer import ResumeAnalyzer


@pytest.fixture
def analyzer():
    """Fresh analyzer instance (they hold no state, but keeps tests independent)."""
    return ResumeAnalyzer()


# === Test client fixture ===
# Creates a fake Flask client so we can call API endpoints
# without running a real server.
@pytest.fixture
def client():
    api.app.config["TESTING"] = True
    with api.app.test_client() as c:
        yield c
