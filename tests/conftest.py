import logging
from typing import Generator

import pytest

from lamb._tools._logging import get_logger
from tests.utils.logs import RecordingHandler


@pytest.fixture
def debug_logs() -> Generator[RecordingHandler, None, None]:
    # the `lamb` logger does not propagate: plug a handler on it directly
    logger = get_logger()
    level = logger.level
    handler = RecordingHandler()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        logger.setLevel(level)
