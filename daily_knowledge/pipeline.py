from __future__ import annotations

from typing import Callable, List, Optional

import requests

from .config import Settings, load_settings
from .errors import JobError
from .gemini import generate_fact
from .logging_utils import log_error, log_info
from .models import GeneratedFact
from .prompt import (
    PROMPT,
    PROMPT_PLAIN,
    REQUEST,
    REQUEST_PLAIN,
    SYSTEM_INSTRUCTION,
    build_prompt,
    build_request,
)
from .seed import generate_seed
from .wikipedia import fetch_random_titles


class FactPipeline:
    """
    Один прогон "факта дня":
    - (опционально) сид + случайные заголовки Википедии как подсказки темы
    - сборка промпта и тела запроса
    - запрос к Gemini и двойной разбор JSON

    enrich=False — упрощённый вариант: только plain-промпт, без сида,
    без Википедии и без системной инструкции.
    """

    def __init__(
        self,
        enrich: bool = True,
        session: Optional[requests.Session] = None,
        seed_factory: Callable[[], str] = generate_seed,
        titles_fetcher: Callable[..., List[str]] = fetch_random_titles,
    ):
        self.enrich = enrich
        self.session = session
        self.seed_factory = seed_factory
        self.titles_fetcher = titles_fetcher

    def build_payload(self) -> str:
        if not self.enrich:
            return build_request(PROMPT_PLAIN, template=REQUEST_PLAIN)

        seed = self.seed_factory()
        titles = self.titles_fetcher(session=self.session)
        prompt = build_prompt(seed, titles, template=PROMPT)
        return build_request(prompt, system_instruction=SYSTEM_INSTRUCTION, template=REQUEST)

    def generate(self, settings: Settings) -> GeneratedFact:
        payload = self.build_payload()
        return generate_fact(payload, settings.api_credential, session=self.session)


def daily_knowledge_job(
    settings_path: Optional[str] = None,
    pipeline: Optional[FactPipeline] = None,
) -> GeneratedFact:
    """
    Тело джобы: настройки -> лог получателей -> факт -> лог факта.
    Первый же JobError прерывает прогон, ничего не ретраим.
    """
    settings = load_settings(settings_path)
    log_info(f"Получатели: {settings.recipients}")

    fact = (pipeline or FactPipeline()).generate(settings)
    log_info(f"Ответ: {fact}")
    return fact


def run_job_safely(
    settings_path: Optional[str] = None,
    pipeline: Optional[FactPipeline] = None,
) -> Optional[GeneratedFact]:
    """
    Обёртка для планировщика и стартового запуска:
    упавший прогон даёт одну строку в логе и не роняет процесс.
    """
    try:
        return daily_knowledge_job(settings_path=settings_path, pipeline=pipeline)
    except JobError as e:
        log_error(f"Ошибка в daily_knowledge_job [{e.kind.value}]: {e}")
        return None
