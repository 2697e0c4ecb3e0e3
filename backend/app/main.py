# app/main.py
import asyncio
import signal
import sys

from app.core.config import Settings, load_settings
from app.core.errors import ConfigurationError, ConnectivityError
from app.core.scheduler import create_scheduler, add_job
from app.db.supabase import init_clients, check_connection
from app.jobs.heartbeat import run_heartbeat

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def print_banner(settings: Settings):
    """Two-line startup banner: who we are and what we are for."""
    # flush so lines reach piped stdout immediately
    print(f"🚀 {settings.PROJECT_NAME} Starting...", flush=True)
    print(f"📍 {settings.PROJECT_TAGLINE}", flush=True)


async def run_backend(client, *, settings: Settings, stop_event: asyncio.Event = None):
    """
    Check the database connection, then log a heartbeat until stopped.

    The heartbeat is only armed once the session check has succeeded.
    A failed check raises ConnectivityError before anything is scheduled.

    Args:
        client: Public Supabase client used for the session check.
        settings: Loaded settings, used for the banner and interval.
        stop_event: Event that ends the run. Defaults to one bound to
            SIGINT and SIGTERM for the whole run, session check included.
    """
    loop = asyncio.get_running_loop()
    bound_signals = ()
    if stop_event is None:
        stop_event = asyncio.Event()
        bound_signals = STOP_SIGNALS
        for sig in bound_signals:
            loop.add_signal_handler(sig, stop_event.set)

    try:
        print_banner(settings)

        session = await check_connection(client)
        state = "active session" if session else "no active session"
        print(f"✅ Database connection successful! ({state})", flush=True)
        print("🏪 Ready to serve the palengke!", flush=True)

        scheduler = create_scheduler()
        add_job(scheduler, run_heartbeat, seconds=settings.HEARTBEAT_SECONDS)
        scheduler.start()

        # Repeated signals only set the event again; we log shutdown once
        await stop_event.wait()
        print(f"👋 Shutting down {settings.PROJECT_NAME}...", flush=True)
        scheduler.shutdown(wait=False)
    finally:
        for sig in bound_signals:
            loop.remove_signal_handler(sig)


def _report_configuration_error(error: ConfigurationError):
    if error.detail:
        print("❌ Invalid Supabase environment variables!", file=sys.stderr)
        print(f"  {error.detail}", file=sys.stderr)
    else:
        print("❌ Missing Supabase environment variables!", file=sys.stderr)
    print("Please check your .env file and ensure you have:", file=sys.stderr)
    for key in error.required:
        print(f"  {key}=...", file=sys.stderr)


def _report_connectivity_error(error: ConnectivityError):
    print("❌ Failed to connect to database:", file=sys.stderr)
    print(f"  {type(error.cause).__name__}: {error.cause}", file=sys.stderr)
    print("💡 Make sure your .env file has the correct Supabase credentials", file=sys.stderr)


def main() -> int:
    """
    Entry point. Returns the process exit status.

    0 after a clean shutdown, 1 when configuration is missing or invalid,
    or the startup connection check fails.
    """
    try:
        settings = load_settings()
        clients = init_clients(settings)
        asyncio.run(run_backend(clients.public, settings=settings))
    except ConfigurationError as e:
        _report_configuration_error(e)
        return 1
    except ConnectivityError as e:
        _report_connectivity_error(e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
