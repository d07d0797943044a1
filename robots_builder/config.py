# === FILE: robots_builder/config.py ===
"""
Модуль для загрузки и валидации параметров вывода robots.txt.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

__all__ = ["OutputOptions", "load_options", "resolve_options"]


class OutputOptions(BaseModel):
    """Параметры сериализации документа в текст robots.txt."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    force: bool = Field(
        False, description="Разрешить вывод документа без единой группы User-agent."
    )


OptionsLike = Union[OutputOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike = None, **overrides: Any) -> OutputOptions:
    """
    Приводит options (модель, mapping или None) к OutputOptions.
    Явные overrides со значением None игнорируются.
    """
    if options is None:
        base = OutputOptions()
    elif isinstance(options, OutputOptions):
        base = options
    elif isinstance(options, Mapping):
        base = OutputOptions(**options)
    else:
        raise TypeError(f"options must be OutputOptions or mapping, got {type(options).__name__}")

    updates = {k: v for k, v in overrides.items() if v is not None}
    if not updates:
        return base
    return OutputOptions(**{**base.model_dump(), **updates})


def _read_options_file(path: Path) -> dict[str, Any]:
    """Разбирает файл параметров вывода (YAML или JSON) в словарь."""
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Файл параметров вывода {path} не является корректным YAML: {exc}") from exc
    elif suffix == ".json":
        try:
            data = json.loads(text) if text.strip() else None
        except json.JSONDecodeError as exc:
            raise ValueError(f"Файл параметров вывода {path} не является корректным JSON: {exc}") from exc
    else:
        raise ValueError(f"Параметры вывода читаются только из YAML или JSON, получено: {suffix or path.name}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypeError(
            f"Параметры вывода в {path} должны быть mapping (force: ...), "
            f"получено {type(data).__name__}"
        )
    return data


def load_options(path: Union[str, Path, None]) -> OutputOptions:
    """
    Читает YAML или JSON и возвращает проверенный объект OutputOptions.
    Без пути возвращает значения по умолчанию.
    """
    if path is None:
        return OutputOptions()

    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    return OutputOptions(**_read_options_file(path_obj))
