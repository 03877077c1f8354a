import json
import logging

import pygame
import pytest

import logger_setup
import main


@pytest.fixture
def run_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    logger = logging.getLogger(logger_setup.LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def write_config(path, **run_control):
    config = {
        "run_id": "smoke",
        "logging": {"level": "DEBUG", "format": "%(levelname)s - %(message)s"},
        "run_control": {"log_throttle_ticks": 5, "max_ticks": 12, "profile": False, **run_control},
    }
    path.write_text(json.dumps(config))
    return str(path)


def test_main_runs_until_max_ticks(run_dir):
    status = main.main(write_config(run_dir / "config.json"))
    assert status == 0
    log = (run_dir / "runs" / "smoke" / "simulation.log").read_text()
    assert "Reached max_ticks (12)" in log
    assert "Exited cleanly after 12 ticks" in log


def test_main_profiles_when_asked(run_dir):
    status = main.main(write_config(run_dir / "config.json", profile=True))
    assert status == 0
    assert "Profiling complete." in (run_dir / "runs" / "smoke" / "simulation.log").read_text()


def test_backend_failure_is_logged_and_reported(run_dir, monkeypatch):
    def broken_set_mode(*args, **kwargs):
        raise pygame.error("no display")

    monkeypatch.setattr(pygame.display, "set_mode", broken_set_mode)
    status = main.main(write_config(run_dir / "config.json"))
    assert status == 1
    assert "Graphics backend failure" in (run_dir / "runs" / "smoke" / "simulation.log").read_text()


def test_main_uses_configured_color_mode(run_dir, monkeypatch):
    monkeypatch.setattr(main.constants, "COLOR_MODE", "static")
    status = main.main(write_config(run_dir / "config.json"))
    assert status == 0
    assert "color mode 'static'" in (run_dir / "runs" / "smoke" / "simulation.log").read_text()


def test_zero_log_throttle_disables_status_lines(run_dir):
    status = main.main(write_config(run_dir / "config.json", log_throttle_ticks=0))
    assert status == 0
    log = (run_dir / "runs" / "smoke" / "simulation.log").read_text()
    assert "Tick=" not in log
    assert "Exited cleanly after 12 ticks" in log
