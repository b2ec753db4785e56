"""Pytest configuration for the localefields test suite.

Hypothesis profiles:
- dev: Local development (100 examples)
- ci: CI runs (25 examples, derandomized)
- verbose: Debug mode with progress output (50 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Every test starts with an empty Locale cache and empty engine memos, so
identity and call-count assertions never see state from an earlier test.
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

from localefields.engine.resolve import resolve_locale
from localefields.runtime import Locale

# Formatting through Babel is slow enough to trip the default deadline.
settings.register_profile(
    "dev",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

settings.register_profile(
    "ci",
    max_examples=25,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

settings.register_profile(
    "verbose",
    max_examples=50,
    verbosity=Verbosity.verbose,
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile from the environment."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


@pytest.fixture(autouse=True)
def _fresh_caches() -> Iterator[None]:
    """Start and end each test with empty locale caches."""
    Locale.clear_cache()
    resolve_locale.cache_clear()
    yield
    Locale.clear_cache()
    resolve_locale.cache_clear()
