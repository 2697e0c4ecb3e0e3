# tests/test_heartbeat.py
from datetime import datetime, timedelta
from unittest.mock import patch

import pytest

from app.core.scheduler import add_job, create_scheduler
from app.jobs.heartbeat import log_heartbeat, run_heartbeat


def test_log_heartbeat_includes_local_time(capsys):
    log_heartbeat(datetime(2026, 10, 18, 14, 5, 9))

    assert capsys.readouterr().out == "🔄 Backend running... 14:05:09\n"


@pytest.mark.asyncio
async def test_run_heartbeat_logs_one_line(capsys):
    await run_heartbeat()

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("🔄 Backend running...")


def test_add_job_uses_interval_without_overlap():
    """
    Heartbeats never overlap and missed runs are not replayed.
    """
    scheduler = create_scheduler()

    job = add_job(scheduler, run_heartbeat, seconds=30)

    assert job.trigger.interval == timedelta(seconds=30)
    assert job.max_instances == 1
    assert job.coalesce is True
    assert not scheduler.running


def test_log_heartbeat_flushes_stdout():
    """
    Heartbeats must show up immediately when stdout is a pipe.
    """
    with patch("builtins.print") as mock_print:
        log_heartbeat(datetime(2026, 10, 18, 9, 0, 0))

    assert mock_print.call_args.kwargs["flush"] is True
