"""Session reminder job entry point.

Run once a day by an external scheduler (cron, Kubernetes CronJob, ...):

    $ loom-session-reminders

Exit codes:
    0: Scan finished (individual reminder failures are logged, not fatal)
    1: Scan could not run (configuration, database, wiring)
"""

import asyncio
import sys

from src.application.jobs import ReminderRunSummary
from src.core.container import (
    get_database,
    get_db_session,
    get_logger,
    get_session_reminder_job,
)


async def run_session_reminders() -> ReminderRunSummary:
    """Run one reminder scan and release database connections."""
    try:
        async with get_db_session() as session:
            job = get_session_reminder_job(session)
            return await job.run()
    finally:
        await get_database().close()


def main() -> int:
    logger = get_logger()
    try:
        summary = asyncio.run(run_session_reminders())
    except Exception as e:
        logger.critical("session_reminder_job_failed", error=e)
        return 1

    logger.info(
        "session_reminder_job_finished",
        matched=summary.matched,
        emitted=summary.emitted,
        failed=summary.failed,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
