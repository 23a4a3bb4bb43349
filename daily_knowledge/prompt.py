"""
Сборка тела запроса к Gemini из статических шаблонов.

Подстановка чисто текстовая (str.replace), без экранирования: заголовок статьи
с кавычкой или с самим плейсхолдером внутри может сломать итоговый JSON.
Это известное ограничение, ловится только на стороне API.
"""
from pathlib import Path
from typing import Iterable, List

ASSETS_DIR = Path(__file__).resolve().parent / "assets"

SEED_PLACEHOLDER = "<seed>"
ARTICLES_PLACEHOLDER = "<articles>"
SYSTEM_INSTRUCTION_PLACEHOLDER = "<system_instruction>"
PROMPT_PLACEHOLDER = "<prompt>"

PLACEHOLDERS = (
    SEED_PLACEHOLDER,
    ARTICLES_PLACEHOLDER,
    SYSTEM_INSTRUCTION_PLACEHOLDER,
    PROMPT_PLACEHOLDER,
)


def _read_asset(name: str) -> str:
    # хвостовой перевод строки из файла внутрь JSON-строки не тащим
    return (ASSETS_DIR / name).read_text(encoding="utf-8").rstrip("\n")


PROMPT = _read_asset("prompt.txt")
PROMPT_PLAIN = _read_asset("prompt_plain.txt")
SYSTEM_INSTRUCTION = _read_asset("system_instruction.txt")
REQUEST = _read_asset("request.json")
REQUEST_PLAIN = _read_asset("request_plain.json")


def build_prompt(seed: str, titles: Iterable[str], template: str = PROMPT) -> str:
    return template.replace(SEED_PLACEHOLDER, seed).replace(
        ARTICLES_PLACEHOLDER, ", ".join(titles)
    )


def build_request(
    prompt: str,
    system_instruction: str = SYSTEM_INSTRUCTION,
    template: str = REQUEST,
) -> str:
    """
    Подставляет системную инструкцию и промпт в скелет тела запроса.
    В plain-шаблоне <system_instruction> нет, первый replace там просто no-op.
    """
    return template.replace(SYSTEM_INSTRUCTION_PLACEHOLDER, system_instruction).replace(
        PROMPT_PLACEHOLDER, prompt
    )


def unresolved_placeholders(text: str) -> List[str]:
    return [p for p in PLACEHOLDERS if p in text]
