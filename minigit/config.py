"""Settings taken from the process environment. Only the CLI reads these."""
import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from .errors import ConfigError

ROOT_ENV = 'ROOT'
LOG_LEVEL_ENV = 'MINIGIT_LOG_LEVEL'
DEFAULT_LOG_LEVEL = logging.WARNING


def root_from_env(environ: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if environ is None else environ
    root = env.get(ROOT_ENV)
    if not root:
        raise ConfigError(f'{ROOT_ENV} is not set')
    return Path(root)


def log_level_from_env(environ: Optional[Mapping[str, str]] = None) -> int:
    env = os.environ if environ is None else environ
    value = env.get(LOG_LEVEL_ENV)
    if not value:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ConfigError(f'unknown log level in {LOG_LEVEL_ENV}: {value!r}')
    return level
