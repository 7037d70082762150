from pathlib import Path
import runpy

import pytest
from loguru import logger

CODE_BLOCKS = Path(__file__).parent.parent / "async_flow" / "code_blocks"


@pytest.fixture
def captured_lines():
    lines = []
    handler_id = logger.add(
        lambda message: lines.append(message.record["message"]),
        format="{message}",
        level="DEBUG",
    )
    yield lines
    logger.remove(handler_id)


@pytest.fixture
def load_code_block():
    def load(number: int) -> dict:
        return runpy.run_path(str(CODE_BLOCKS / f"{number}.py"))

    return load
