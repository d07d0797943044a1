# File: robots_builder/utils.py
"""robots_builder.utils: Разбор JSON-входа (строка или готовый объект) для методов from_json."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, List, Sequence, Union

from robots_builder.errors import InvalidPayload

__all__: Sequence[str] = (
    "JSONInput",
    "load_json_object",
    "ensure_list",
)

JSONInput = Union[str, bytes, bytearray, Mapping[str, Any]]


def load_json_object(data: JSONInput, what: str = "payload") -> Mapping[str, Any]:
    """Возвращает mapping из JSON-строки или уже разобранного объекта.

    Ошибка разбора JSON (json.JSONDecodeError) пробрасывается как есть.
    """
    if isinstance(data, (str, bytes, bytearray)):
        data = json.loads(data)
    if not isinstance(data, Mapping):
        raise InvalidPayload(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def ensure_list(data: Mapping[str, Any], key: str) -> List[Any]:
    """Достаёт список по ключу; отсутствующий ключ или null дают пустой список."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise InvalidPayload(f"'{key}' must be a list, got {type(value).__name__}")
    return list(value)
