# app/core/config.py
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

# Keys that must be present before any Supabase client is built
REQUIRED_KEYS = ("SUPABASE_URL", "SUPABASE_ANON_KEY")
# Only needed for admin operations that bypass row level security
OPTIONAL_KEYS = ("SUPABASE_SERVICE_ROLE_KEY",)


@dataclass(frozen=True)
class Settings:
    # Supabase project connection details
    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None
    # Identity shown in the startup banner
    PROJECT_NAME: str = "Online Palengke Backend"
    PROJECT_TAGLINE: str = "Connecting Dipolog City residents with local vendors"
    # Interval between liveness log lines
    HEARTBEAT_SECONDS: int = 30


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Read Supabase configuration from the environment.

    Args:
        environ: Mapping to read from. Defaults to os.environ after
            loading any .env file into the process environment.

    Returns:
        Settings: Values as found, with empty strings treated as absent.
    """
    if environ is None:
        # Existing process variables take precedence over .env
        load_dotenv()
        environ = os.environ

    values = {key: environ.get(key) or None for key in REQUIRED_KEYS + OPTIONAL_KEYS}
    return Settings(**values)
