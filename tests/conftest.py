import logging

import pytest

from hsacl import Index


@pytest.fixture
def base_dir(tmp_path):
    return tmp_path / "state"


@pytest.fixture
def output_path(tmp_path):
    return tmp_path / "acl.hujson"


@pytest.fixture
def index(base_dir, output_path):
    return Index.open(base_dir, output_path)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("HSACL_DIR", "HSACL_OUTPUT", "HSACL_LOG_LEVEL", "HSACL_LOG_FILE"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_hsacl_logger():
    yield
    logger = logging.getLogger("hsacl")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
