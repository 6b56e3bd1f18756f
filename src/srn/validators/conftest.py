"""
Pytest configuration for SRN validators.

Fixtures live in shared_fixtures.py and are re-exported here so every
validator module can use them without importing.
"""
import logging

import pytest

from srn.validators.shared_fixtures import *  # noqa: F401,F403


@pytest.fixture(autouse=True)
def _debug_logging(caplog):
    """Capture srn debug logs so failing tests show the steps taken."""
    caplog.set_level(logging.DEBUG, logger="srn")
