"""
Configuration Management

Loads column summary settings from a YAML file and environment variables,
and builds the default summary chain from them.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from dotenv import find_dotenv, load_dotenv

from .core import AbstractSummary, ChainedSummaries, NumRange, StringCounter, TimeRange
from .exceptions import UnsupportedTypeError
from .utils.logging_utils import get_logger, setup_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = 'COLUMN_SUMMARIES_CONFIG'
DEFAULT_CONFIG_FILE = 'column_summaries.yaml'

DEFAULTS: Dict[str, Any] = {
    'logging': {
        'level': 'INFO',
        'file': None,
        'colorize': True,
    },
    'display': {
        'limit': 10,
    },
    'chain': {
        'members': ['int', 'float', 'date', 'string'],
        'date_format': 'yyyy-mm-dd',
    },
    'stream': {
        'progress': False,
    },
}

TEMPORAL_MEMBERS = ('date', 'datetime', 'time')


def _deep_update(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_update(base[key], value)
        else:
            base[key] = value
    return base


def load_yaml(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the YAML is malformed
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    return data or {}


class Config:
    """
    Column summaries configuration.

    Loads configuration from, in increasing precedence:
    1. Built-in defaults
    2. YAML file (``$COLUMN_SUMMARIES_CONFIG`` or ./column_summaries.yaml)
    3. Environment variables, including those from a .env file

    Example:
        >>> config = Config()
        >>> config.get('chain.date_format')
        'yyyy-mm-dd'
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to YAML config file (optional)
        """
        env_path = find_dotenv(usecwd=True)
        if env_path:
            load_dotenv(env_path)
            logger.debug(f"Loaded environment variables from: {env_path}")

        self.config = copy.deepcopy(DEFAULTS)

        explicit = config_file is not None or os.getenv(CONFIG_ENV_VAR)
        if config_file is None:
            config_file = os.getenv(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE)

        if Path(config_file).exists():
            _deep_update(self.config, load_yaml(config_file))
            logger.info(f"Loaded config from: {config_file}")
        elif explicit:
            logger.warning(f"Config file not found: {config_file}")

        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply environment variable overrides to config."""
        if os.getenv('COLUMN_SUMMARIES_LOG_LEVEL'):
            self.set('logging.level', os.getenv('COLUMN_SUMMARIES_LOG_LEVEL'))

        if os.getenv('COLUMN_SUMMARIES_DISPLAY_LIMIT'):
            self.set('display.limit', int(os.getenv('COLUMN_SUMMARIES_DISPLAY_LIMIT')))

        if os.getenv('COLUMN_SUMMARIES_DATE_FORMAT'):
            self.set('chain.date_format', os.getenv('COLUMN_SUMMARIES_DATE_FORMAT'))

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Example:
            >>> config.get('display.limit')
            10
            >>> config.get('nonexistent.key', 'default')
            'default'
        """
        value = self.config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """Set a configuration value using dot notation."""
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            config = config.setdefault(k, {})

        config[keys[-1]] = value

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.config)


_global_config = None


def get_config(config_file: Optional[Union[str, Path]] = None) -> Config:
    """
    Get or create the global configuration instance.

    Args:
        config_file: Path to config file (only used on first call)
    """
    global _global_config

    if _global_config is None:
        _global_config = Config(config_file)
        configure_logging(_global_config)

    return _global_config


def configure_logging(config: Config) -> None:
    """Set up the package logger from the logging section of ``config``."""
    setup_logger(
        __name__.split('.')[0],
        log_file=config.get('logging.file'),
        level=config.get('logging.level', 'INFO'),
        colorize=config.get('logging.colorize', True)
    )


def loaded_config() -> Optional[Config]:
    """Return the global configuration if it was loaded, without loading it."""
    return _global_config


def reset_config() -> None:
    """Forget the global configuration so the next get_config() reloads it."""
    global _global_config
    _global_config = None


def build_member(name: str, date_format: Optional[str] = None) -> AbstractSummary:
    """
    Build one chain member from its configured name.

    Args:
        name: ``string``, ``int``, ``float``, a numpy dtype name such as
            ``int32``, or ``date``/``datetime``/``time`` optionally followed
            by ``:<pattern>``
        date_format: Pattern for temporal members without their own

    Example:
        >>> build_member('date:dd/mm/yyyy').dateformat
        DateFormat('dd/mm/yyyy')
    """
    kind, _, pattern = name.partition(':')
    kind = kind.strip()

    if kind == 'string':
        return StringCounter()
    if kind in TEMPORAL_MEMBERS:
        return TimeRange(kind, pattern or (date_format if kind == 'date' else None))
    if pattern:
        raise UnsupportedTypeError(f"Only temporal chain members take a format: {name!r}")
    if kind == 'int':
        return NumRange(int)
    if kind == 'float':
        return NumRange(float)
    return NumRange(kind)


def build_chain(config: Optional[Config] = None) -> ChainedSummaries:
    """
    Build the chain described by ``chain.members``.

    Example:
        >>> chain = build_chain()
        >>> [type(member).__name__ for member in chain]
        ['NumRange', 'NumRange', 'TimeRange', 'StringCounter']
    """
    config = config or get_config()
    members: List[str] = config.get('chain.members') or []
    date_format = config.get('chain.date_format')

    if not members:
        logger.error("Config key chain.members is empty")
    chain = ChainedSummaries(*[build_member(name, date_format) for name in members])

    logger.debug(f"Built chain from config: {members}")
    return chain
