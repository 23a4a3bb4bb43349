from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.cron import CronTrigger

from .config import get_timezone
from .logging_utils import log_info, setup_logging
from .pipeline import run_job_safely

# Каждый день в полночь
DAILY_CRON = "0 0 * * *"


class JobScheduler:
    """
    Явный планировщик вместо глобальной регистрации:
    держит пары (cron-выражение, обработчик) и отдаёт их APScheduler.
    """

    def __init__(self, timezone: str = "UTC", scheduler=None):
        self.timezone = timezone
        self.scheduler = scheduler or BlockingScheduler(timezone=timezone)
        self.jobs: List[Tuple[str, Callable[[], object]]] = []

    def add(self, cron: str, handler: Callable[[], object], job_id: str) -> None:
        trigger = CronTrigger.from_crontab(cron, timezone=self.timezone)
        self.scheduler.add_job(handler, trigger, id=job_id)
        self.jobs.append((cron, handler))

    def start(self) -> None:
        self.scheduler.start()

    def shutdown(self) -> None:
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)


def job_daily_knowledge() -> None:
    run_job_safely()


def main(scheduler: Optional[JobScheduler] = None) -> None:
    setup_logging()
    scheduler = scheduler or JobScheduler(timezone=get_timezone())

    log_info("Запуск планировщика daily-knowledge...")

    # первый прогон сразу, не дожидаясь полуночи
    job_daily_knowledge()

    scheduler.add(DAILY_CRON, job_daily_knowledge, job_id="daily_knowledge_job")
    log_info(f"Планировщик запущен. Ежедневный запуск в 00:00 ({scheduler.timezone}).")

    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        log_info("Получен сигнал остановки, планировщик выключается.")
        scheduler.shutdown()


if __name__ == "__main__":
    main()
