import pytest

from tokenlog import Logger


@pytest.fixture
def buffer_logger():
    """Logger writing to an in-memory buffer."""
    logger = Logger('buffer', progname='testprog')
    yield logger
    logger.close()
