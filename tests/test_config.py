"""
Tests for configuration loading, validation and logging setup.
"""

import logging
from pathlib import Path

import pytest
import yaml

from c23_railroad.utils.config import Config
from c23_railroad.utils.config_validation import validate_config
from c23_railroad.utils.logging import run_name_for, setup_logging


def write_config(tmp_path, data):
    path = tmp_path / "config.yml"
    path.write_text(yaml.safe_dump(data))
    return Config(str(path))


@pytest.fixture
def valid_data():
    return {
        "output": {"root": "build", "html_path": "${output.root}/page.html", "logs_dir": "logs"},
        "logging": {"level": "INFO", "to_file": False},
        "render": {
            "filter": "",
            "sections": ["lexical", "expressions"],
            "strategies": ["vector", "markup"],
        },
    }


class TestConfig:
    """Tests for Config."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "missing.yml"))

    def test_dot_notation(self, tmp_path, valid_data):
        config = write_config(tmp_path, valid_data)
        assert config.get("render.sections") == ["lexical", "expressions"]
        assert config.get("render.missing", "fallback") == "fallback"
        config.set("render.filter", "declarator")
        assert config["render"]["filter"] == "declarator"

    def test_output_references_and_env_vars(self, tmp_path, valid_data, monkeypatch):
        monkeypatch.setenv("C23_LOG_DIR", "/var/tmp/c23")
        valid_data["output"]["logs_dir"] = "$C23_LOG_DIR/logs"
        config = write_config(tmp_path, valid_data)
        assert config.get("output.html_path") == "build/page.html"
        assert config.get("output.logs_dir") == "/var/tmp/c23/logs"

    def test_unknown_reference_is_left_alone(self, tmp_path, valid_data):
        valid_data["output"]["html_path"] = "${output.nowhere}/page.html"
        config = write_config(tmp_path, valid_data)
        assert config.get("output.html_path") == "${output.nowhere}/page.html"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert Config(str(path)).get("render.filter", "") == ""

    def test_shipped_config_is_valid(self):
        config_path = Path(__file__).parent.parent / "configs" / "render_config.yml"
        config = Config(str(config_path))
        validate_config(config)
        assert config.get("output.html_path") == "build/c23-syntax-diagrams.html"


class TestValidateConfig:
    """Tests for validate_config."""

    def test_valid(self, tmp_path, valid_data):
        validate_config(write_config(tmp_path, valid_data))

    @pytest.mark.parametrize("key,value", [
        ("output.html_path", ""),
        ("render.sections", ["lexical", "types"]),
        ("render.sections", "lexical"),
        ("render.strategies", ["png"]),
        ("render.strategies", []),
        ("render.filter", 3),
        ("logging.level", "LOUD"),
    ])
    def test_invalid(self, tmp_path, valid_data, key, value):
        config = write_config(tmp_path, valid_data)
        config.set(key, value)
        with pytest.raises(ValueError):
            validate_config(config)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.usefixtures("restore_root_logger")
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_only(self, tmp_path):
        logger = setup_logging(log_dir=str(tmp_path / "logs"), log_level="DEBUG", log_to_file=False)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert not (tmp_path / "logs").exists()

    def test_file_handler(self, tmp_path):
        logger = setup_logging(log_dir=str(tmp_path / "logs"), log_level="info", log_to_file=True)
        assert len(logger.handlers) == 2
        assert list((tmp_path / "logs").glob("render_*.log"))

    def test_file_named_and_tagged_by_run(self, tmp_path):
        logger = setup_logging(
            log_dir=str(tmp_path / "logs"), log_level="WARNING", log_to_file=True,
            run_name="c23-syntax-diagrams"
        )
        logging.getLogger("c23_railroad.test").debug("rendered declarator")
        for handler in logger.handlers:
            handler.flush()

        (log_file,) = (tmp_path / "logs").glob("c23-syntax-diagrams_*.log")
        text = log_file.read_text(encoding="utf-8")
        assert " - c23-syntax-diagrams - c23_railroad.test - DEBUG - rendered declarator" in text
        assert logger.handlers[0].level == logging.WARNING


class TestRunNameFor:
    """Tests for run_name_for."""

    @pytest.mark.parametrize("html_path,expected", [
        ("build/c23-syntax-diagrams.html", "c23-syntax-diagrams"),
        ("out/my page (draft).html", "my_page_draft"),
        ("", "render"),
        (None, "render"),
        ("build/___.html", "render"),
    ])
    def test_run_name(self, html_path, expected):
        assert run_name_for(html_path) == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
