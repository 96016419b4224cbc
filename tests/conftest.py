"""Shared pytest setup for the rtextmerge tests.

Hypothesis runs under one of three named profiles:
    dev      500 examples per property, random seed (default)
    ci       50 examples, fixed seed, failing blobs printed
    verbose  100 examples with per-example output

HYPOTHESIS_PROFILE picks a profile by name; otherwise CI=true selects "ci".

Codec fuzz properties carry @pytest.mark.fuzz and only run when asked for,
either with ``pytest -m fuzz`` or by naming test_interchange_fuzzing.py.
"""

import os

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

_SUPPRESSED = [HealthCheck.function_scoped_fixture]

settings.register_profile(
    "dev", max_examples=500, phases=_PHASES, suppress_health_check=_SUPPRESSED
)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
    suppress_health_check=_SUPPRESSED,
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
    suppress_health_check=_SUPPRESSED,
)

_PROFILES = ("dev", "ci", "verbose")

_FUZZ_MODULE = "test_interchange_fuzzing"


def _detect_profile() -> str:
    """Profile named by HYPOTHESIS_PROFILE, else "ci" under CI, else "dev"."""
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "fuzz: long-running codec properties, skipped unless selected",
    )


def _fuzz_requested(config: pytest.Config) -> bool:
    if "fuzz" in str(config.getoption("-m", default="")):
        return True
    return any(_FUZZ_MODULE in str(arg) for arg in config.invocation_params.args)


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked items in ordinary runs."""
    if _fuzz_requested(config):
        return
    skip_fuzz = pytest.mark.skip(reason="codec fuzzing; select with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
