"""
Pytest configuration for the Suriyayart suite.

- Registers Hypothesis profiles for local dev and CI.
- Provides a Flask test client built from the app factory.
- Adds a 'slow' marker (not used by default, but handy if you add heavier tests).
"""

from __future__ import annotations

import os
import pytest
from hypothesis import settings, HealthCheck


# ──────────────────────────────────────────────────────────────────────────────
# Hypothesis profiles
# ──────────────────────────────────────────────────────────────────────────────
settings.register_profile(
    "dev",
    settings(
        deadline=None,           # avoid flaky timeouts on slower runners
        max_examples=60,         # fast local runs
        suppress_health_check=[HealthCheck.too_slow],
    ),
)
settings.register_profile(
    "ci",
    settings(
        deadline=None,
        max_examples=200,        # the engine is cheap; widen the search in CI
        suppress_health_check=[HealthCheck.too_slow],
    ),
)

_profile = (
    "ci"
    if (os.getenv("CI") or os.getenv("GITHUB_ACTIONS"))
    else os.getenv("HYPOTHESIS_PROFILE", "dev")
)
settings.load_profile(_profile)


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "slow: mark test as slow")
    config.addinivalue_line("filterwarnings", "ignore::DeprecationWarning")


def pytest_sessionstart(session: pytest.Session) -> None:
    # suriyayart.main registers Prometheus collectors in the global registry and
    # builds an app at import time; import it once up front so a test that makes
    # create_app() fail cannot leave a half-imported module behind.
    import suriyayart.main  # noqa: F401


def pytest_report_header(config: pytest.Config) -> str:
    return f"Hypothesis profile: '{_profile}'"


# ──────────────────────────────────────────────────────────────────────────────
# Global fixtures
# ──────────────────────────────────────────────────────────────────────────────

@pytest.fixture()
def app():
    from suriyayart.main import create_app
    flask_app = create_app()
    flask_app.testing = True
    return flask_app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture(scope="session")
def sample_input():
    """The reference moment: 15 Sep 2566 BE, 14:45, Bangkok."""
    from suriyayart.core.validators import CalculationInput
    return CalculationInput(day=15, month_th=9, year_be=2566, hour=14, minute=45, province="Bangkok")
