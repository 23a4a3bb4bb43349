from __future__ import annotations

from typing import List, Optional

import requests
from requests import RequestException

from .config import get_http_timeout
from .errors import ErrorKind, JobError
from .logging_utils import log_info

WIKI_API_URL = "https://en.wikipedia.org/w/api.php"
USER_AGENT = "daily-knowledge - https://github.com/ToBinio/daily-knowledge"
DEFAULT_LIMIT = 25


def _titles_from_payload(data: object) -> List[str]:
    """
    Ожидаемая форма ответа: {"query": {"random": [{"title": "..."}, ...]}}.
    Порядок заголовков сохраняем как в ответе.
    """
    query = data.get("query") if isinstance(data, dict) else None
    pages = query.get("random") if isinstance(query, dict) else None

    if not isinstance(pages, list):
        raise JobError(
            ErrorKind.SHAPE_MISMATCH,
            "Не удалось разобрать JSON Википедии: нет списка query.random",
        )

    titles: List[str] = []
    for page in pages:
        title = page.get("title") if isinstance(page, dict) else None
        if not isinstance(title, str):
            raise JobError(
                ErrorKind.SHAPE_MISMATCH,
                f"Не удалось разобрать JSON Википедии: элемент без title: {page!r}",
            )
        titles.append(title)

    return titles


def fetch_random_titles(
    limit: int = DEFAULT_LIMIT,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> List[str]:
    """
    Один GET к random-листингу Википедии (только основное пространство имён).
    Без ретраев: любая ошибка прерывает текущий запуск джобы.
    """
    http = session or requests
    params = {
        "action": "query",
        "format": "json",
        "list": "random",
        "rnnamespace": 0,
        "rnlimit": limit,
    }

    try:
        resp = http.get(
            WIKI_API_URL,
            params=params,
            headers={"User-Agent": USER_AGENT},
            timeout=timeout or get_http_timeout(),
        )
        body = resp.text
    except RequestException as exc:
        raise JobError(
            ErrorKind.NETWORK,
            f"Не удалось отправить запрос к Википедии: {exc}",
            cause=exc,
        ) from exc

    try:
        data = resp.json()
    except (ValueError, RecursionError) as exc:
        raise JobError(
            ErrorKind.DECODE,
            f"Не удалось разобрать JSON Википедии: {exc}; тело ответа: {body[:500]}",
            cause=exc,
        ) from exc

    titles = _titles_from_payload(data)
    log_info(f"Википедия: получено {len(titles)} заголовков")
    return titles
