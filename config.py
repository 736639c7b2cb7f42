"""Load and validate configuration."""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import yaml

from sorts import Algorithm

DEFAULT_CONFIG = Path(__file__).parent / "config.yaml"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_WORD_ALGORITHMS = [Algorithm.SELECTION, Algorithm.INSERTION, Algorithm.BUBBLE]


@dataclass
class LogConfig:
    level: str = DEFAULT_LOG_LEVEL
    to_file: bool = False
    dir: str = "logs"


@dataclass
class Config:
    seed: int | None = None
    show: bool = False  # print sorted sequences after each trial
    word_algorithms: list[Algorithm] = field(default_factory=lambda: list(DEFAULT_WORD_ALGORITHMS))
    log: LogConfig = field(default_factory=LogConfig)

    @classmethod
    def load(cls, config_path: Path) -> "Config":
        with open(config_path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid config {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid config {config_path}: expected a mapping")

        log_data = _section(data, "log", config_path)
        log_config = LogConfig(
            level=str(log_data.get("level", DEFAULT_LOG_LEVEL)).upper(),
            to_file=_flag(log_data, "to_file", config_path),
            dir=log_data.get("dir", "logs"),
        )
        if not isinstance(logging.getLevelName(log_config.level), int):
            raise ValueError(f"Unknown log level: {log_config.level}")

        log_dir = Path(log_config.dir)
        if not log_dir.is_absolute():
            log_config.dir = str((Path(config_path).parent / log_dir).resolve())

        words = _section(data, "words", config_path)
        names = words.get("algorithms")
        if names is not None and not isinstance(names, list):
            raise ValueError(f"Invalid config {config_path}: words.algorithms must be a list, got {names!r}")
        word_algorithms = [Algorithm.parse(n) for n in names] if names else list(DEFAULT_WORD_ALGORITHMS)

        seed = data.get("seed")
        if seed is not None and not isinstance(seed, int):
            raise ValueError(f"seed must be an integer, got {seed!r}")

        return cls(
            seed=seed,
            show=_flag(data, "show", config_path),
            word_algorithms=word_algorithms,
            log=log_config,
        )

    @classmethod
    def load_or_default(cls, config_path: Path | None) -> "Config":
        if config_path is None or not config_path.exists():
            return cls()
        return cls.load(config_path)


def _section(data: dict, key: str, config_path: Path) -> dict:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Invalid config {config_path}: {key} must be a mapping, got {section!r}")
    return section


def _flag(data: dict, key: str, config_path: Path) -> bool:
    value = data.get(key, False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"Invalid config {config_path}: {key} must be true or false, got {value!r}")
    return value


def load_config(parser: argparse.ArgumentParser, path: str | None) -> Config:
    """Load an explicit config path strictly; fall back to defaults when the bundled one is absent."""
    try:
        if path:
            return Config.load(Path(path))
        return Config.load_or_default(DEFAULT_CONFIG)
    except (ValueError, OSError) as e:
        parser.error(str(e))


def setup_logging(log_config: LogConfig, verbose: bool = False) -> Path | None:
    """Configure the root logger. Returns the log file path when logging to a file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    log_file = None
    if log_config.to_file:
        log_dir = Path(log_config.dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"run_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=logging.DEBUG if verbose else log_config.level,
        format="%(asctime)s %(levelname)s %(message)s",
        handlers=handlers,
        force=True,
    )
    return log_file
