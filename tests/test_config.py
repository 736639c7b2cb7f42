import argparse
import logging

import pytest

from config import DEFAULT_CONFIG, DEFAULT_WORD_ALGORITHMS, Config, LogConfig, load_config, setup_logging
from sorts import Algorithm, UnknownAlgorithmError


@pytest.fixture
def write_config(tmp_path):
    def write(text):
        path = tmp_path / "config.yaml"
        path.write_text(text)
        return path

    return write


def test_load(write_config, tmp_path):
    path = write_config(
        "seed: 42\n"
        "show: true\n"
        "words:\n"
        "  algorithms: [ShellSort, BubbleSort]\n"
        "log:\n"
        "  level: debug\n"
        "  to_file: true\n"
        "  dir: out\n"
    )
    config = Config.load(path)
    assert config.seed == 42
    assert config.show is True
    assert config.word_algorithms == [Algorithm.SHELL, Algorithm.BUBBLE]
    assert config.log == LogConfig(level="DEBUG", to_file=True, dir=str((tmp_path / "out").resolve()))


def test_load_empty_file_uses_defaults(write_config):
    config = Config.load(write_config(""))
    assert config.seed is None
    assert config.show is False
    assert config.word_algorithms == DEFAULT_WORD_ALGORITHMS
    assert config.log.level == "WARNING"
    assert config.log.to_file is False


def test_load_empty_sections(write_config):
    config = Config.load(write_config("words:\nlog:\n"))
    assert config.word_algorithms == DEFAULT_WORD_ALGORITHMS


def test_load_unknown_algorithm(write_config):
    with pytest.raises(UnknownAlgorithmError):
        Config.load(write_config("words:\n  algorithms: [QuickSort]\n"))


@pytest.mark.parametrize(
    "text",
    [
        "log:\n  level: LOUD\n",
        "seed: abc\n",
        "- just\n- a list\n",
        "seed: [unclosed\n",
        "log: 5\n",
        "words:\n  - ShellSort\n",
        "words:\n  algorithms: ShellSort\n",
        "show: \"false\"\n",
        "log:\n  to_file: yes please\n",
    ],
)
def test_load_invalid(write_config, text):
    with pytest.raises(ValueError):
        Config.load(write_config(text))


def test_load_or_default_missing(tmp_path):
    assert Config.load_or_default(tmp_path / "missing.yaml") == Config()
    assert Config.load_or_default(None) == Config()


def test_load_config_explicit_missing_path_is_an_error(tmp_path):
    with pytest.raises(SystemExit) as exc:
        load_config(argparse.ArgumentParser(), str(tmp_path / "missing.yaml"))
    assert exc.value.code == 2


def test_setup_logging_to_file(tmp_path):
    log_file = setup_logging(LogConfig(level="INFO", to_file=True, dir=str(tmp_path / "logs")))
    logging.getLogger("sortbench-test").info("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert log_file.parent == tmp_path / "logs"
    assert "hello" in log_file.read_text()


def test_setup_logging_verbose():
    assert setup_logging(LogConfig(level="WARNING"), verbose=True) is None
    assert logging.getLogger().level == logging.DEBUG


@pytest.mark.parametrize("text", ["words:\n  algorithms: ShellSort\n", "log: 5\n"])
def test_load_invalid_section_is_a_usage_error(write_config, text, capsys):
    with pytest.raises(SystemExit) as exc:
        load_config(argparse.ArgumentParser(), str(write_config(text)))
    assert exc.value.code == 2
    err = capsys.readouterr().err
    assert "Invalid config" in err
    assert "S is not implemented" not in err


def test_defaults_match_bundled_config():
    assert Config.load(DEFAULT_CONFIG).log.level == Config().log.level
