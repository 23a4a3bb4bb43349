import logging
import sys


logger = logging.getLogger("daily_knowledge")


def setup_logging(level: int = logging.INFO) -> None:
    """
    Вся диагностика идёт одним потоком в stdout (удобно для Docker-логов).
    Повторный вызов не плодит хендлеры.
    """
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)


def log_info(msg: str) -> None:
    logger.info(msg)


def log_error(msg: str) -> None:
    logger.error(msg)
