"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['IMAGEDUPES_LOG_LEVEL'] = 'WARNING'

    logging.getLogger().setLevel(logging.WARNING)

    # Skipped-file warnings are expected in several tests
    for logger_name in ['imagedupes.dedup.model', 'imagedupes.dedup.deletion']:
        logging.getLogger(logger_name).setLevel(logging.ERROR)
