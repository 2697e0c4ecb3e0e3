# app/jobs/heartbeat.py
from datetime import datetime


def log_heartbeat(now: datetime = None):
    """Print a liveness line with the current local time."""
    now = now or datetime.now()
    print(f"🔄 Backend running... {now.strftime('%H:%M:%S')}", flush=True)


async def run_heartbeat():
    """
    Scheduler entry point for the heartbeat.

    AsyncIOScheduler runs coroutine jobs on the event loop itself, while
    plain functions would be handed to a thread pool.
    """
    log_heartbeat()
