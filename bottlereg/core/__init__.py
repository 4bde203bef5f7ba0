# bottlereg/core/__init__.py
from .config import ReaderConfig, load_config
from .exceptions import (
    BottleRegError,
    ConfigError,
    MalformedValueError,
    RegistryFileError,
    WindowsVersionUndetermined,
)
from .logger import Log

__all__ = [
    "ReaderConfig",
    "load_config",
    "BottleRegError",
    "ConfigError",
    "MalformedValueError",
    "RegistryFileError",
    "WindowsVersionUndetermined",
    "Log",
]
