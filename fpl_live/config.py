"""Client configuration management."""

import os
from functools import lru_cache

from .schemas import ClientConfig
from .utils import load_json

CONFIG_ENV_VAR = 'FPL_LIVE_CONFIG'


@lru_cache(maxsize=None)
def get_config(path: str | None = None) -> ClientConfig:
    """
    Load client configuration.

    The file is taken from ``path`` or, failing that, the FPL_LIVE_CONFIG
    environment variable. With neither set, built-in defaults are used.
    Configuration is cached per path after first load.

    Returns:
        ClientConfig object with validated settings

    Raises:
        FileNotFoundError: If the named config file doesn't exist
        ValueError: If config file has invalid structure

    Example:
        from fpl_live.config import get_config
        config = get_config()
        print(f"API: {config.base_url}")
    """
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return ClientConfig()
    return load_json(path, schema=ClientConfig)


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file or FPL_LIVE_CONFIG changes during runtime.
    """
    get_config.cache_clear()
