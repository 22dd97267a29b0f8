import logging

import pytest
from fastapi.testclient import TestClient

from string_service_api.app.core.config import Settings
from string_service_api.app.core.logging_config import NOISY_LOGGERS, resolve_level, setup_logging
from string_service_api.app.main import create_app


def test_api_prefix_moves_json_routes():
    app = create_app(Settings(api_prefix="/api/v1", project_name="Prefixed"))
    client = TestClient(app)

    assert client.post("/api/v1/count", json={"s": "abc"}).json() == {"v": 3}
    assert client.post("/count", json={"s": "abc"}).status_code == 405
    assert app.title == "Prefixed"


@pytest.fixture
def bare_root():
    """Run with an unconfigured root logger, restoring everything afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    saved_library_levels = {name: logging.getLogger(name).level for name in NOISY_LOGGERS}
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)
        for name, level in saved_library_levels.items():
            logging.getLogger(name).setLevel(level)


@pytest.mark.parametrize(
    "name, expected",
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("chatty", logging.INFO), ("basic_format", logging.INFO)],
)
def test_resolve_level(name, expected):
    assert resolve_level(name) == expected


def test_setup_logging_configures_root_once(bare_root, tmp_path):
    logfile = tmp_path / "service.log"

    setup_logging("debug", str(logfile))
    assert bare_root.level == logging.DEBUG
    assert len(bare_root.handlers) == 2

    setup_logging("error")
    assert bare_root.level == logging.DEBUG
    assert len(bare_root.handlers) == 2

    logging.getLogger("string_service_api.test").info("hello")
    for handler in bare_root.handlers:
        handler.flush()
    assert "[INFO] string_service_api.test: hello" in logfile.read_text(encoding="utf-8")


def test_setup_logging_quiets_http_libraries(bare_root):
    setup_logging("info")
    assert bare_root.level == logging.INFO
    assert len(bare_root.handlers) == 1
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_setup_logging_debug_keeps_http_libraries_verbose(bare_root):
    setup_logging("debug")
    assert logging.getLogger("urllib3").level == logging.DEBUG
