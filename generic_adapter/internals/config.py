"""Process-wide settings for generic_adapter.

Settings are read once from the environment and can be replaced at runtime:

- GENERIC_ADAPTER_STRICT: when truthy (1/true/yes/on), failed verify_* guards
  print a diagnostic to stderr and terminate with exit status 2 instead of
  raising VerificationError.
- NO_COLOR: disables ANSI colors in guard diagnostics.
"""
from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, Mapping, Optional

STRICT_ENV = "GENERIC_ADAPTER_STRICT"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AdapterConfig:
    """Settings bundle consulted by the verification guards."""

    strict: bool = False
    use_color: Optional[bool] = None  # None → decide per stream (TTY detection)


def load_config(environ: Optional[Mapping[str, str]] = None) -> AdapterConfig:
    env = os.environ if environ is None else environ
    strict = env.get(STRICT_ENV, "").strip().lower() in _TRUTHY
    use_color = False if "NO_COLOR" in env else None
    return AdapterConfig(strict=strict, use_color=use_color)


_config: Optional[AdapterConfig] = None


def get_config() -> AdapterConfig:
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(cfg: AdapterConfig) -> None:
    global _config
    _config = cfg


def reset_config() -> None:
    """Forget the current settings; the next get_config() rereads the environment."""
    global _config
    _config = None


@contextmanager
def configured(**overrides) -> Iterator[AdapterConfig]:
    """Temporarily override settings.

    Example:
        >>> with configured(strict=True):
        ...     verify_int("x")  # exits with status 2
    """
    previous = _config
    cfg = replace(get_config(), **overrides)
    set_config(cfg)
    try:
        yield cfg
    finally:
        if previous is None:
            reset_config()
        else:
            set_config(previous)


__all__ = [
    "STRICT_ENV",
    "AdapterConfig",
    "load_config",
    "get_config",
    "set_config",
    "reset_config",
    "configured",
]
