from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_MAX_REGS = 1000
DEFAULT_NATIVE_BITS = 64
DEFAULT_EXPONENT_BITS = 32


def repo_root() -> Path:
    # Project root is the directory that contains the `fractran/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`; fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


@dataclass(frozen=True)
class FractranSettings:
    # Number of allowed primes: the registers a program can read and write.
    # 1000 means 7919 is the largest usable prime factor; 7927 is the first
    # that cannot be expressed.
    max_regs: int = DEFAULT_MAX_REGS
    native_bits: int = DEFAULT_NATIVE_BITS
    exponent_bits: int = DEFAULT_EXPONENT_BITS

    @property
    def native_max(self) -> int:
        return (1 << self.native_bits) - 1

    @property
    def exponent_max(self) -> int:
        return (1 << self.exponent_bits) - 1


def _positive_int_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return value


def load_settings() -> FractranSettings:
    load_env()
    return FractranSettings(
        max_regs=_positive_int_env("FRACTRAN_MAX_REGS", DEFAULT_MAX_REGS),
        native_bits=_positive_int_env("FRACTRAN_NATIVE_BITS", DEFAULT_NATIVE_BITS),
        exponent_bits=_positive_int_env("FRACTRAN_EXPONENT_BITS", DEFAULT_EXPONENT_BITS),
    )


@lru_cache(maxsize=1)
def runtime_settings() -> FractranSettings:
    """Settings fixed for the life of the process.

    Read once, on the first numeric value built; later environment changes are
    ignored until ``runtime_settings.cache_clear()``.
    """
    return load_settings()
