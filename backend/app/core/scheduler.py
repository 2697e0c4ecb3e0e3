# app/core/scheduler.py
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger


def create_scheduler() -> AsyncIOScheduler:
    """
    Create a scheduler that runs jobs on the current asyncio event loop.

    Jobs fire on the same thread as the rest of the backend, so a
    coroutine job never runs alongside other code.
    """
    return AsyncIOScheduler()


def add_job(scheduler: AsyncIOScheduler, func, seconds: int = 30):
    """
    Fire `func` every `seconds` on the given scheduler.

    The first run happens one full interval after the scheduler starts.
    A firing is skipped if the previous one is still running, and a loop
    that fell behind gets a single late firing rather than a burst.

    Returns:
        The APScheduler Job.
    """
    trigger = IntervalTrigger(seconds=seconds)
    return scheduler.add_job(func, trigger, max_instances=1, coalesce=True)
