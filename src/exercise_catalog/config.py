"""Environment configuration for exercise-catalog."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# Checked in order; the first non-empty value wins
URL_VARIABLES = ("VITE_SUPABASE_URL", "SUPABASE_URL")
SERVICE_KEY_VARIABLE = "SUPABASE_SERVICE_ROLE_KEY"


class ConfigurationError(Exception):
    """Raised when required environment configuration is missing."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            "Missing Supabase configuration: " + ", ".join(missing)
        )


@dataclass(frozen=True)
class Settings:
    """Credentials for the Supabase project holding the exercises table."""

    supabase_url: str
    service_role_key: str
    table: str = "exercises"


def load_settings(env_file: Path | None = None) -> Settings:
    """Load settings from the process environment.

    Values from env_file, or the nearest .env above the working directory,
    are loaded first without overriding variables that are already set.

    Raises:
        ConfigurationError: If the URL or the service role key is missing
    """
    load_dotenv(env_file or find_dotenv(usecwd=True), override=False)

    url = next((os.getenv(name) for name in URL_VARIABLES if os.getenv(name)), None)
    key = os.getenv(SERVICE_KEY_VARIABLE)

    missing = []
    if not url:
        missing.append(URL_VARIABLES[0])
    if not key:
        missing.append(SERVICE_KEY_VARIABLE)
    if missing:
        raise ConfigurationError(missing)

    return Settings(supabase_url=url, service_role_key=key)
