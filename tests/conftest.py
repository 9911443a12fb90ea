import pytest
from loguru import logger


@pytest.fixture
def warnings_logged():
    messages: list[str] = []
    handler_id = logger.add(
        lambda m: messages.append(m.record["message"]), level="WARNING"
    )
    yield messages
    logger.remove(handler_id)
