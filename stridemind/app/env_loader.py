"""Environment handling for the StrideMind API.

Imported first by the app so that settings from `.env.dev` are in place before the
history routes read them. Staging and prod get their settings from the deployment
environment, so nothing is loaded from disk there.

Every setting the API reads is optional:
    HISTORY_USER_TIMEZONE: IANA zone for "today" when a request doesn't name one.
    CORS_ALLOW_ORIGINS: Comma-separated origins allowed by the CORS middleware.
    LOG_LEVEL: Level for the `stridemind` loggers.
"""

import os
from typing import Literal
from dotenv import load_dotenv

EnvironmentName = Literal["dev", "staging", "prod"]

_ENVIRONMENTS = ("dev", "staging", "prod")


def get_current_environment() -> EnvironmentName:
    """Get the current environment (dev, staging, or prod)."""
    env = os.getenv("ENV", "dev")
    if env in _ENVIRONMENTS:
        return env  # type: ignore[return-value]
    raise ValueError(f"Invalid ENV value: {env}. Must be 'dev', 'staging', or 'prod'.")


if get_current_environment() == "dev":
    load_dotenv(".env.dev")


def get_default_user_timezone() -> str | None:
    """IANA timezone used for "today" when a request doesn't pass one."""
    return os.getenv("HISTORY_USER_TIMEZONE") or None
