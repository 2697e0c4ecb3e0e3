# app/db/supabase.py
import asyncio
from dataclasses import dataclass
from typing import Optional

from supabase import create_client, Client, SupabaseException

from app.core.config import Settings
from app.core.errors import ConfigurationError, ConnectivityError


@dataclass(frozen=True)
class SupabaseClients:
    """
    Clients built once at startup and passed to whatever needs them.

    `public` uses the anon key and respects row level security.
    `admin` uses the service role key and is None when no key is configured.
    """

    public: Client
    admin: Optional[Client] = None

    @property
    def has_admin(self) -> bool:
        return self.admin is not None


def _create(url: str, key: str, key_name: str) -> Client:
    # create_client only validates and stores the settings; no request is made here
    try:
        return create_client(url, key)
    except SupabaseException as e:
        raise ConfigurationError(detail=f"{e} (check SUPABASE_URL and {key_name})") from e


def build_client(url: Optional[str], anon_key: Optional[str]) -> Client:
    """
    Build the public Supabase client.

    Raises:
        ConfigurationError: If the URL or anon key is empty, or rejected
            by supabase-py (e.g. a placeholder URL left in .env).
    """
    missing = [
        name
        for name, value in (("SUPABASE_URL", url), ("SUPABASE_ANON_KEY", anon_key))
        if not value
    ]
    if missing:
        raise ConfigurationError(missing)

    return _create(url, anon_key, "SUPABASE_ANON_KEY")


def build_admin_client(url: str, service_role_key: Optional[str]) -> Optional[Client]:
    """Build the admin client, or return None when no service role key is set."""
    if not service_role_key:
        return None
    return _create(url, service_role_key, "SUPABASE_SERVICE_ROLE_KEY")


def init_clients(settings: Settings) -> SupabaseClients:
    """
    Build the public client and, if configured, the admin client.

    The public client is built first, so missing required settings stop
    startup before any client exists.
    """
    public = build_client(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)
    # Admin operations always target the same project as the public client
    admin = build_admin_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)

    print("✅ Supabase connected successfully!", flush=True)
    return SupabaseClients(public=public, admin=admin)


async def check_connection(client: Client):
    """
    Confirm Supabase is reachable by asking the auth service for a session.

    A missing session still counts as success; only a raised error
    is treated as a failed connection.

    Returns:
        The current session, or None when nobody is signed in.

    Raises:
        ConnectivityError: If the session lookup fails for any reason.
    """
    try:
        # get_session() is blocking in supabase-py; keep the loop free
        return await asyncio.to_thread(client.auth.get_session)
    except Exception as e:
        raise ConnectivityError(e) from e
