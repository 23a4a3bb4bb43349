from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import load_dotenv

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import ErrorKind, JobError

DEFAULT_SETTINGS_PATH = "settings.toml"
DEFAULT_TIMEZONE = "UTC"
DEFAULT_HTTP_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    recipients: Tuple[str, ...]
    api_credential: str

    @classmethod
    def from_mapping(cls, data: dict) -> "Settings":
        emails = data.get("emails")
        key = data.get("gemini_key")

        if not isinstance(emails, list) or not all(isinstance(e, str) for e in emails):
            raise JobError(
                ErrorKind.CONFIG_PARSE,
                "Не удалось разобрать настройки: 'emails' должен быть массивом строк",
            )
        if not isinstance(key, str):
            raise JobError(
                ErrorKind.CONFIG_PARSE,
                "Не удалось разобрать настройки: 'gemini_key' должен быть строкой",
            )

        return cls(recipients=tuple(emails), api_credential=key)


@lru_cache(maxsize=1)
def _load_env() -> None:
    """
    .env читаем один раз и только когда он реально понадобился
    (без сайд-эффекта при импорте).
    """
    load_dotenv()


def get_settings_path() -> str:
    _load_env()
    return os.getenv("DAILY_KNOWLEDGE_SETTINGS", DEFAULT_SETTINGS_PATH)


def get_timezone() -> str:
    _load_env()
    return os.getenv("DAILY_KNOWLEDGE_TIMEZONE", DEFAULT_TIMEZONE)


def get_http_timeout() -> float:
    """
    Таймаут HTTP-запросов в секундах. Мусор в env — это ошибка конфигурации
    прогона, а не падение процесса.
    """
    _load_env()
    raw = os.getenv("DAILY_KNOWLEDGE_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT))

    try:
        timeout = float(raw)
    except ValueError as exc:
        raise JobError(
            ErrorKind.CONFIG_PARSE,
            f"DAILY_KNOWLEDGE_HTTP_TIMEOUT должен быть числом, получено {raw!r}",
            cause=exc,
        ) from exc

    if timeout <= 0:
        raise JobError(
            ErrorKind.CONFIG_PARSE,
            f"DAILY_KNOWLEDGE_HTTP_TIMEOUT должен быть > 0, получено {raw!r}",
        )

    return timeout


def load_settings(path: Optional[str] = None) -> Settings:
    """
    Читает settings.toml заново на каждый запуск джобы, ничего не кэширует.

    - файл не читается        -> JobError(CONFIG_READ)
    - битый TOML / не те поля -> JobError(CONFIG_PARSE)
    """
    path = path or get_settings_path()

    try:
        with open(path, encoding="utf-8") as fh:
            content = fh.read()
    except OSError as exc:
        raise JobError(
            ErrorKind.CONFIG_READ,
            f"Не удалось прочитать файл настроек: {exc}",
            cause=exc,
        ) from exc

    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise JobError(
            ErrorKind.CONFIG_PARSE,
            f"Не удалось разобрать настройки: {exc}",
            cause=exc,
        ) from exc

    return Settings.from_mapping(data)
