import sys
import os
import logging

import pytest
import structlog

# Add project root to sys.path so that tests can import download_outcome without installing it
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    structlog.reset_defaults()
    logging.root.handlers = []
