import pytest

from mandelzoom.util.logging_setup import get_logger


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = get_logger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.propagate = True
