import logging

import pytest


@pytest.fixture(autouse=True)
def reset_bin2obj_logger():
    """main() installs a stdout handler; drop it so later tests start clean."""
    yield
    logger = logging.getLogger("bin2obj")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
