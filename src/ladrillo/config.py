"""ContextVar-based configuration for Ladrillo.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Selector combination and JSON serialization read the active config at call
time, so callers can change behavior for a block of code without threading
options through every call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from ladrillo.config import LadrilloConfig, config_context

    with config_context(LadrilloConfig(strict_combinators=True)):
        combine(by_element("ul"), ">", by_element("li"))

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class LadrilloConfig:
    """Immutable library configuration.

    Attributes:
        sort_keys: Sort object keys in to_json output
        indent: Default JSON indentation (None for compact output)
        strict_combinators: Raise InvalidCombinatorError for combinators
            other than ' ', '+', '~', '>' instead of logging a warning

    """

    sort_keys: bool = False
    indent: int | None = None
    strict_combinators: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LadrilloConfig":
        """Create LadrilloConfig from dictionary.

        Unknown keys are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                LadrilloConfig attribute names.

        Returns:
            New LadrilloConfig instance with values from dict.

        Example:
            >>> config = LadrilloConfig.from_dict({"indent": 2, "unknown_key": 1})
            >>> config.indent
            2

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: LadrilloConfig = LadrilloConfig()

_config: ContextVar[LadrilloConfig] = ContextVar(
    "ladrillo_config",
    default=_DEFAULT_CONFIG,
)


def get_config() -> LadrilloConfig:
    """Get current configuration (thread-local)."""
    return _config.get()


def set_config(config: LadrilloConfig) -> None:
    """Set configuration for current context.

    Args:
        config: LadrilloConfig instance to use for this context.

    """
    _config.set(config)


def reset_config() -> None:
    """Reset to the module-level default configuration."""
    _config.set(_DEFAULT_CONFIG)


@contextmanager
def config_context(config: LadrilloConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with config_context(LadrilloConfig(sort_keys=True)):
        ...     to_json({"b": 1, "a": 2})
        '{"a":2,"b":1}'

    """
    previous = _config.get()
    _config.set(config)
    try:
        yield
    finally:
        _config.set(previous)


__all__ = [
    "LadrilloConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
]
