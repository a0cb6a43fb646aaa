"""Configuration loaded once from the environment."""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

U64_MAX = 2**64 - 1


class ConfigError(ValueError):
    """A required environment variable is missing or invalid."""


def _require(env: Mapping[str, str], name: str) -> str:
    value = env.get(name, "")
    if not value:
        raise ConfigError(f"{name} is not set")
    return value


def _require_u64(env: Mapping[str, str], name: str) -> int:
    raw = _require(env, name).strip()
    try:
        value = int(raw, 10)
    except ValueError:
        raise ConfigError(f"{name} must be an unsigned integer, got {raw!r}") from None
    if not 0 <= value <= U64_MAX:
        raise ConfigError(f"{name} is out of range: {value}")
    return value


@dataclass(frozen=True)
class RelayConfig:
    """Immutable relay settings shared by every event handler invocation."""

    channel_id: int
    target_user_id: int
    target_text: str
    webhook_url: str
    token: str = field(default="", repr=False)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "RelayConfig":
        """Create RelayConfig from environment variables.

        Raises ConfigError naming the first variable that is missing or
        fails to parse.
        """
        if env is None:
            env = os.environ
        return cls(
            token=_require(env, "DISCORD_TOKEN"),
            channel_id=_require_u64(env, "CHANNEL_ID"),
            target_text=_require(env, "TARGET_MESSAGE"),
            target_user_id=_require_u64(env, "TARGET_USER_ID"),
            webhook_url=_require(env, "WEBHOOK_URL"),
        )


def load_config(dotenv_path: Optional[str] = None) -> RelayConfig:
    """Read an optional .env file, then build RelayConfig from os.environ."""
    load_dotenv(dotenv_path or find_dotenv(usecwd=True))
    return RelayConfig.from_env()
