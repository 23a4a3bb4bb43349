from __future__ import annotations

import json
import sys

from .config import load_settings
from .errors import JobError
from .logging_utils import log_error, log_info
from .prompt import (
    PROMPT,
    PROMPT_PLAIN,
    REQUEST,
    REQUEST_PLAIN,
    SYSTEM_INSTRUCTION,
    build_prompt,
    build_request,
    unresolved_placeholders,
)

SAMPLE_SEED = "healthcheck0seed"
SAMPLE_TITLES = ["Alpha", "Beta"]


def check_settings() -> bool:
    """
    Файл настроек читается, есть хотя бы один получатель и ключ Gemini.
    Никаких запросов наружу, только валидация конфигурации.
    """
    try:
        settings = load_settings()
    except JobError as exc:
        log_error(f"Healthcheck: {exc}")
        return False

    ok = True

    if not settings.recipients:
        log_error("Healthcheck: список emails пуст.")
        ok = False

    if not settings.api_credential:
        log_error("Healthcheck: gemini_key не задан.")
        ok = False

    return ok


def check_templates() -> bool:
    """
    Оба варианта шаблонов после подстановки тестовых значений:
    - не содержат неразрешённых плейсхолдеров;
    - дают валидный JSON.
    """
    variants = {
        "enriched": build_request(
            build_prompt(SAMPLE_SEED, SAMPLE_TITLES, template=PROMPT),
            system_instruction=SYSTEM_INSTRUCTION,
            template=REQUEST,
        ),
        "plain": build_request(PROMPT_PLAIN, template=REQUEST_PLAIN),
    }

    ok = True
    for name, payload in variants.items():
        leftovers = unresolved_placeholders(payload)
        if leftovers:
            log_error(f"Healthcheck: в шаблоне {name} остались плейсхолдеры {leftovers}")
            ok = False
            continue
        try:
            json.loads(payload)
        except ValueError as exc:
            log_error(f"Healthcheck: шаблон {name} не даёт валидный JSON: {exc}")
            ok = False

    return ok


def main() -> int:
    """
    0 — всё ок, иначе 1. Нужно для Docker HEALTHCHECK.
    """
    ok_settings = check_settings()
    ok_templates = check_templates()

    if ok_settings and ok_templates:
        log_info("Healthcheck: OK")
        return 0

    log_error("Healthcheck: FAILED")
    return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())  # pragma: no cover
