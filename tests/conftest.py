from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.component_builder import ComponentTreeBuilder


@pytest.fixture
def component_tree(tmp_path: Path) -> ComponentTreeBuilder:
    """Provide a reusable component library builder rooted at the pytest tmp_path."""
    return ComponentTreeBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_compdoc_logger() -> Iterator[None]:
    """Undo CLI logging setup so caplog sees compdoc records in every test."""
    yield
    logger = logging.getLogger("compdoc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
