"""Pytest configuration for the currencydata test suite.

Hypothesis profiles:
- dev: Local development with 200 examples
- ci: CI runs with 50 examples, derandomized
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Fixture data under tests/data is a trimmed copy of ISO 4217 list one and
the cldr-core files the pipeline reads. No test touches the network.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from currencydata.sources import load_cldr_directory
from currencydata.types import RawSources

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FIXTURE DATA
# =============================================================================

DATA_DIR = Path(__file__).parent / "data"
ISO_FIXTURE = DATA_DIR / "list-one.xml"
CLDR_FIXTURE = DATA_DIR / "cldr-core"


@pytest.fixture
def iso_file() -> Path:
    """Trimmed ISO 4217 list one."""
    return ISO_FIXTURE


@pytest.fixture
def cldr_dir() -> Path:
    """Trimmed cldr-core directory."""
    return CLDR_FIXTURE


@pytest.fixture
def registry_xml() -> bytes:
    """Raw bytes of the trimmed ISO 4217 list one."""
    return ISO_FIXTURE.read_bytes()


@pytest.fixture
def raw_sources(registry_xml: bytes) -> RawSources:
    """Fully loaded fixture sources."""
    return RawSources(registry_xml=registry_xml, cldr=load_cldr_directory(CLDR_FIXTURE))
