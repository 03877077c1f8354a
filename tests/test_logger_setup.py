import json
import logging

import pytest

import logger_setup

CONFIG = {
    "run_id": "unit",
    "logging": {"level": "DEBUG", "format": "%(levelname)s - %(message)s"},
}


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(logger_setup.LOGGER_NAME)
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def test_setup_logging_writes_run_log(tmp_path, clean_logger):
    logger = logger_setup.setup_logging(CONFIG, runs_dir=str(tmp_path))
    logger.debug("hello from the test")
    for handler in logger.handlers:
        handler.flush()
    log_file = tmp_path / "unit" / "simulation.log"
    assert log_file.exists()
    assert "hello from the test" in log_file.read_text()
    assert logger.propagate is False
    assert logger.level == logging.DEBUG


def test_setup_logging_twice_does_not_duplicate_handlers(tmp_path, clean_logger):
    logger_setup.setup_logging(CONFIG, runs_dir=str(tmp_path))
    logger = logger_setup.setup_logging(CONFIG, runs_dir=str(tmp_path))
    assert len(logger.handlers) == 2


def test_load_config_reads_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(CONFIG))
    assert logger_setup.load_config(str(path)) == CONFIG


def test_load_config_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        logger_setup.load_config(str(tmp_path / "nope.json"))


def test_load_config_bad_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(json.JSONDecodeError):
        logger_setup.load_config(str(path))
