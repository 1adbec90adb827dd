import logging

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture
def restore_root_logger():
    """Remove the handlers installed by setup_logging() and restore the level."""
    root_logger = logging.getLogger()
    saved_level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(saved_level)
