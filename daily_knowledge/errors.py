from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    CONFIG_READ = "config_read"
    CONFIG_PARSE = "config_parse"
    NETWORK = "network"
    DECODE = "decode"
    SHAPE_MISMATCH = "shape_mismatch"


class JobError(Exception):
    """
    Единая ошибка шага пайплайна.

    kind    — к какому классу отказа относится (можно ветвиться, если понадобится)
    message — человекочитаемая причина, её и печатаем в лог
    cause   — исходное исключение библиотеки, если было
    """

    def __init__(self, kind: ErrorKind, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return self.message
