import logging
import os
import subprocess
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from snowid import ConfigurationError, IdGenerator, create_generator
from snowid.config import config


@pytest.fixture
def settings(monkeypatch, tmp_path):
    dev = config["development"]
    monkeypatch.setattr(dev, "MACHINE_ID", 12)
    monkeypatch.setattr(dev, "MAX_MACHINE_ID", 64)
    monkeypatch.setattr(dev, "MAX_SEQUENCE", 1024)
    monkeypatch.setattr(dev, "LOG_PATH", str(tmp_path / "logs"))
    yield dev
    logger = logging.getLogger("snowid")
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.setLevel(logging.NOTSET)


def test_builds_generator_from_config(settings):
    generator = create_generator("development")
    assert isinstance(generator, IdGenerator)
    assert generator.machine_id == 12
    assert generator.max_machine_id == 64
    assert generator.max_sequence == 1024
    assert generator.decompose(generator.next_id()).machine_id == 12


def test_sets_up_logging(settings, tmp_path):
    create_generator("development")
    logger = logging.getLogger("snowid")
    assert logger.level == logging.DEBUG
    assert any(isinstance(handler, RotatingFileHandler) for handler in logger.handlers)
    assert (tmp_path / "logs" / "snowid.log").exists()


def test_production_logs_at_info(settings, monkeypatch, tmp_path):
    prod = config["production"]
    monkeypatch.setattr(prod, "LOG_PATH", str(tmp_path / "prod-logs"))
    create_generator("production")
    assert logging.getLogger("snowid").level == logging.INFO


def test_invalid_config_is_rejected(settings, monkeypatch):
    monkeypatch.setattr(settings, "MACHINE_ID", 64)
    with pytest.raises(ConfigurationError):
        create_generator("development")


def test_unknown_config_name(settings):
    with pytest.raises(KeyError):
        create_generator("staging")


def test_defaults():
    assert config["development"].DEBUG is True
    assert config["production"].DEBUG is False


def test_bad_environment_only_breaks_the_factory(tmp_path):
    root = Path(__file__).resolve().parent.parent
    env = dict(os.environ, MACHINE_ID="abc", PYTHONPATH=str(root))
    script = (
        "from snowid import IdGenerator, create_generator\n"
        "assert IdGenerator(1, 2, 2).next_id() > 0\n"
        "try:\n"
        "    create_generator()\n"
        "except ValueError:\n"
        "    print('factory rejected')\n"
    )
    result = subprocess.run(
        [sys.executable, "-c", script], cwd=tmp_path, env=env, capture_output=True, text=True
    )
    assert result.returncode == 0, result.stderr
    assert "factory rejected" in result.stdout
