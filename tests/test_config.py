"""Tests for config loading and the active configuration."""

import logging
import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from expectkit import ExpectationsConfig, configuration, configure, expect, reset_configuration
from expectkit.config import configure_logging, load_config
from sample_matchers import Eq


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "expectkit.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_defaults():
    cfg = ExpectationsConfig()
    assert cfg.max_formatted_output_length == 200
    assert cfg.warn_on_invalid_message is True
    assert cfg.log_file is None
    assert cfg.verbose is False


def test_load_config(tmp_yaml):
    path = tmp_yaml("""\
        max_formatted_output_length: 80
        warn_on_invalid_message: false
        verbose: true
    """)
    cfg = load_config(path)
    assert cfg.max_formatted_output_length == 80
    assert cfg.warn_on_invalid_message is False
    assert cfg.verbose is True


def test_load_empty_config(tmp_yaml):
    cfg = load_config(tmp_yaml(""))
    assert cfg == ExpectationsConfig()


def test_load_config_rejects_non_mapping(tmp_yaml):
    with pytest.raises(ValueError, match="mapping"):
        load_config(tmp_yaml("- a\n- b\n"))


def test_unknown_keys_rejected(tmp_yaml):
    path = tmp_yaml("""\
        colour: true
    """)
    with pytest.raises(ValidationError):
        load_config(path)


def test_length_must_be_positive(tmp_yaml):
    path = tmp_yaml("""\
        max_formatted_output_length: 0
    """)
    with pytest.raises(ValidationError, match="must be positive"):
        load_config(path)


def test_null_length_disables_truncation(tmp_yaml):
    path = tmp_yaml("""\
        max_formatted_output_length: null
    """)
    assert load_config(path).max_formatted_output_length is None


def test_relative_log_file_resolved_against_config_dir(tmp_yaml, tmp_path):
    path = tmp_yaml("""\
        log_file: logs/debug.log
    """)
    cfg = load_config(path)
    assert cfg.log_file == str((tmp_path / "logs" / "debug.log").resolve())


def test_env_vars_expanded(tmp_yaml, tmp_path, monkeypatch):
    monkeypatch.setenv("EXPECTKIT_TEST_LOG", str(tmp_path / "env.log"))
    path = tmp_yaml("""\
        log_file: ${EXPECTKIT_TEST_LOG}
    """)
    assert load_config(path).log_file == str(tmp_path / "env.log")


def test_env_var_default_used(tmp_yaml, tmp_path, monkeypatch):
    monkeypatch.delenv("EXPECTKIT_UNSET", raising=False)
    path = tmp_yaml("""\
        log_file: ${EXPECTKIT_UNSET:-fallback.log}
    """)
    assert load_config(path).log_file == str((tmp_path / "fallback.log").resolve())


def test_missing_env_var_raises(tmp_yaml, monkeypatch):
    monkeypatch.delenv("EXPECTKIT_UNSET", raising=False)
    path = tmp_yaml("""\
        log_file: ${EXPECTKIT_UNSET}
    """)
    with pytest.raises(ValueError, match="EXPECTKIT_UNSET"):
        load_config(path)


# --- active configuration ---


def test_configure_overrides_and_reset():
    cfg = configure(max_formatted_output_length=50)
    assert configuration() is cfg
    assert cfg.max_formatted_output_length == 50
    assert cfg.warn_on_invalid_message is True

    reset_configuration()
    assert configuration().max_formatted_output_length == 200


def test_configure_with_model():
    configure(ExpectationsConfig(verbose=True), warn_on_invalid_message=False)
    assert configuration().verbose is True
    assert configuration().warn_on_invalid_message is False


def test_configure_validates():
    with pytest.raises(ValidationError):
        configure(max_formatted_output_length=-1)
    assert configuration().max_formatted_output_length == 200


def test_configure_logging_without_log_file():
    assert configure_logging(ExpectationsConfig()) is None


def test_configure_logging_writes_expectation_debug_output(tmp_path):
    log_file = tmp_path / "logs" / "debug.log"
    logger = configure_logging(ExpectationsConfig(log_file=str(log_file)))
    assert logger is logging.getLogger("expectkit")

    with pytest.raises(AssertionError):
        expect(1).to(Eq(2))

    assert "Expectation not met: expected 1 to eq 2" in log_file.read_text()


def _example_configs() -> list[Path]:
    repo_root = Path(__file__).resolve().parents[1]
    examples_dir = repo_root / "examples"
    return sorted(p for p in examples_dir.glob("*.yaml") if p.is_file())


@pytest.mark.parametrize("path", _example_configs(), ids=lambda p: p.name)
def test_example_configs_load(path, monkeypatch):
    monkeypatch.delenv("EXPECTKIT_LOG", raising=False)
    cfg = load_config(path)
    assert cfg.log_file is not None
    assert Path(cfg.log_file).is_absolute()


# --- logging applied by configure() ---


def test_configure_with_log_file_writes_expectation_debug_output(tmp_path):
    log_file = tmp_path / "debug.log"
    configure(log_file=str(log_file))

    with pytest.raises(AssertionError):
        expect(3).to(Eq(4))

    assert "Expectation not met: expected 3 to eq 4" in log_file.read_text()


def test_configure_verbose_adds_stderr_handler(tmp_path):
    configure(log_file=str(tmp_path / "debug.log"), verbose=True)
    handler_types = [type(h).__name__ for h in logging.getLogger("expectkit").handlers]
    assert sorted(handler_types) == ["FileHandler", "StreamHandler"]


def test_configure_unrelated_setting_keeps_handlers(tmp_path):
    configure(log_file=str(tmp_path / "debug.log"))
    handlers = list(logging.getLogger("expectkit").handlers)

    configure(max_formatted_output_length=50)

    assert logging.getLogger("expectkit").handlers == handlers


def test_reset_configuration_removes_handlers(tmp_path):
    log_file = tmp_path / "debug.log"
    configure(log_file=str(log_file))
    reset_configuration()

    assert logging.getLogger("expectkit").handlers == []
    with pytest.raises(AssertionError):
        expect(5).to(Eq(6))
    assert "expected 5 to eq 6" not in log_file.read_text()


def test_configure_from_loaded_file(tmp_yaml, tmp_path):
    path = tmp_yaml("""\
        log_file: logs/run.log
    """)
    configure(load_config(path))

    with pytest.raises(AssertionError):
        expect(1).to(Eq(2))

    assert "expected 1 to eq 2" in (tmp_path / "logs" / "run.log").read_text()
