"""
Pytest configuration for dialcount tests.

Provides:
- Hypothesis profiles (select with HYPOTHESIS_PROFILE=ci)
- repo_root fixture for subprocess CLI tests
- Shared sample input
"""

import os
from pathlib import Path

import pytest
from hypothesis import settings

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# print_blob=True makes failures easy to reproduce.
# NOTE: Do NOT set database=None - that DISABLES the example database.

settings.register_profile(
    "default",
    print_blob=True,
    derandomize=False,
)

# CI profile: more examples, same reproduction settings
settings.register_profile(
    "ci",
    max_examples=500,
    print_blob=True,
    derandomize=False,
)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


# =============================================================================
# Shared fixtures
# =============================================================================

SAMPLE_INPUT = "\n".join(
    ["L68", "L30", "R48", "L5", "R60", "L55", "L1", "L99", "R14", "L82"]
)


@pytest.fixture
def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


@pytest.fixture
def sample_input() -> str:
    return SAMPLE_INPUT
