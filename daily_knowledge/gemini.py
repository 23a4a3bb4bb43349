from __future__ import annotations

import json
from typing import Optional

import requests
from requests import RequestException

from .config import get_http_timeout
from .errors import ErrorKind, JobError
from .logging_utils import log_info
from .models import GeneratedFact

GEMINI_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-2.0-flash:generateContent"
)
API_KEY_HEADER = "X-goog-api-key"


def send_request(
    payload: str,
    api_key: str,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> str:
    """
    POST готового тела запроса, возвращаем сырой текст ответа.
    HTTP-статус не проверяем: тело ошибки API всё равно попадёт
    в диагностику на этапе разбора конверта.
    """
    http = session or requests
    log_info(payload)

    try:
        resp = http.post(
            GEMINI_URL,
            data=payload.encode("utf-8"),
            headers={
                "Content-Type": "application/json",
                API_KEY_HEADER: api_key,
            },
            timeout=timeout or get_http_timeout(),
        )
        return resp.text
    except RequestException as exc:
        raise JobError(
            ErrorKind.NETWORK,
            f"Не удалось отправить запрос к ИИ: {exc}",
            cause=exc,
        ) from exc


def extract_text(body: str) -> str:
    """
    Внешний слой: конверт Gemini -> candidates[0].content.parts[0].text.
    """
    try:
        envelope = json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise JobError(
            ErrorKind.DECODE,
            f"Не удалось десериализовать ответ ИИ: {exc}",
            cause=exc,
        ) from exc

    try:
        text = envelope["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise JobError(
            ErrorKind.SHAPE_MISMATCH,
            f"Не удалось получить ответ ИИ: {body}",
            cause=exc,
        ) from exc

    if not isinstance(text, str):
        raise JobError(
            ErrorKind.SHAPE_MISMATCH,
            f"Не удалось получить ответ ИИ: поле text не строка: {body}",
        )

    return text


def parse_fact(text: str) -> GeneratedFact:
    """Внутренний слой: text сам по себе JSON с title/category/content."""
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise JobError(
            ErrorKind.DECODE,
            f"Не удалось десериализовать ответ ИИ: {exc}",
            cause=exc,
        ) from exc

    return GeneratedFact.from_dict(data)


def generate_fact(
    payload: str,
    api_key: str,
    session: Optional[requests.Session] = None,
) -> GeneratedFact:
    body = send_request(payload, api_key, session=session)
    return parse_fact(extract_text(body))
