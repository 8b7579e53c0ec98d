import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    messages = []
    handler = logger.add(messages.append, level="TRACE", format="{level}: {message}")
    logger.enable("automaton")
    try:
        yield messages
    finally:
        logger.remove(handler)
        logger.disable("automaton")
