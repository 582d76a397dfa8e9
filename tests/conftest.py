"""Pytest configuration for the localetoolkit test suite.

Hypothesis profiles:
- dev: 500 examples per property, the local default
- ci: 50 derandomized examples, selected when CI=true
- verbose: 100 examples with Hypothesis progress output

Set HYPOTHESIS_PROFILE to pick a profile explicitly.

Tests under tests/fuzz are marked ``fuzz`` and only run with ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Return HYPOTHESIS_PROFILE if valid, else "ci" under CI, else "dev"."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip ``fuzz``-marked tests unless the run selects them with ``-m fuzz``."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
