import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers installed by the CLI so later tests see records through caplog."""
    yield
    logger = logging.getLogger("arg_schema_to_code")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
