import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger('ssh_alias')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
