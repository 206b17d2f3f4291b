# -*- coding: utf-8 -*-
import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """
    Restaura handlers y nivel del root logger tras cada test que llama
    setup_logging() (dictConfig reemplaza los handlers del root).
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
# Fin del archivo tests/shared/config/conftest.py
