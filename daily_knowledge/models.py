from __future__ import annotations

from dataclasses import dataclass

from .errors import ErrorKind, JobError

FACT_FIELDS = ("title", "category", "content")


@dataclass(frozen=True)
class GeneratedFact:
    title: str
    category: str
    content: str

    @classmethod
    def from_dict(cls, data: object) -> "GeneratedFact":
        if not isinstance(data, dict):
            raise JobError(
                ErrorKind.SHAPE_MISMATCH,
                f"Не удалось разобрать ответ ИИ: ожидался JSON-объект, получено {type(data).__name__}",
            )

        values = {}
        for field in FACT_FIELDS:
            value = data.get(field)
            if not isinstance(value, str):
                raise JobError(
                    ErrorKind.SHAPE_MISMATCH,
                    f"Не удалось разобрать ответ ИИ: поле '{field}' отсутствует или не строка",
                )
            values[field] = value

        return cls(**values)
