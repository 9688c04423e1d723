import logging

import pytest

from utils import logger as app_logger


@pytest.fixture(autouse=True)
def fresh_logger():
    yield
    log = logging.getLogger(app_logger.LOGGER_NAME)
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
    app_logger._logger = None
