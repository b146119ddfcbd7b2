"""Environment-driven defaults for the scanner.

Explicit CLI arguments take priority over these environment variables, which
in turn take priority over the built-in defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from collections.abc import Mapping

from .errors import ConfigError
from .walker import DEFAULT_MAX_DEPTH, MAX_ALLOWED_DEPTH

LIST_ENV_VAR = "NPM_COMPROMISED_SCAN_LIST"
WARN_ONLY_ENV_VAR = "NPM_COMPROMISED_SCAN_WARN_ONLY"
MAX_DEPTH_ENV_VAR = "NPM_COMPROMISED_SCAN_MAX_DEPTH"
STEP_SUMMARY_ENV_VAR = "GITHUB_STEP_SUMMARY"

DEFAULT_LIST_PATH = "compromised.txt"
DEFAULT_FAIL_EXIT_CODE = 42
ERROR_EXIT_CODE = 2
_TRUTHY = {"1", "true", "yes", "y"}


@dataclass(slots=True, frozen=True)
class Settings:
    list_path: str
    warn_only: bool
    max_depth_env: str | None
    step_summary_path: str | None

    @property
    def max_depth(self) -> int:
        """Depth ceiling from the environment, validated on first use."""
        if self.max_depth_env:
            return parse_max_depth(self.max_depth_env)
        return DEFAULT_MAX_DEPTH


def is_truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def parse_max_depth(value: str | int) -> int:
    try:
        depth = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid max depth '{value}' (must be an integer)") from exc
    if depth < 1 or depth > MAX_ALLOWED_DEPTH:
        raise ConfigError(f"Max depth must be between 1 and {MAX_ALLOWED_DEPTH}, got {depth}")
    return depth


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ

    return Settings(
        list_path=env.get(LIST_ENV_VAR) or DEFAULT_LIST_PATH,
        warn_only=is_truthy(env.get(WARN_ONLY_ENV_VAR)),
        max_depth_env=env.get(MAX_DEPTH_ENV_VAR, "").strip() or None,
        step_summary_path=env.get(STEP_SUMMARY_ENV_VAR) or None,
    )
