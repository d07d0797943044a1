# File: robots_builder/errors.py
"""robots_builder.errors: Иерархия исключений для построения robots.txt.

Все ошибки возникают синхронно, до изменения модели: неудачный вызов
оставляет документ в прежнем состоянии.
"""

from __future__ import annotations

__all__ = [
    "RobotsTxtError",
    "InvalidDirective",
    "InvalidValueType",
    "InvalidAgentType",
    "InvalidRuleType",
    "InvalidGroupType",
    "InvalidDocumentType",
    "InvalidURLType",
    "InvalidHostType",
    "InvalidPayload",
    "EmptyDocument",
]


class RobotsTxtError(Exception):
    """Базовое исключение пакета robots_builder."""


class InvalidDirective(RobotsTxtError, ValueError):
    """Директива не входит в Allow / Disallow / Crawl-delay."""

    def __init__(self, directive: object) -> None:
        self.directive = directive
        super().__init__(f"Invalid directive: {directive!r}")


class InvalidValueType(RobotsTxtError, TypeError):
    """Значение правила не строка и не число."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Rule value must be a string or number, got {type(value).__name__}")


class InvalidAgentType(RobotsTxtError, TypeError):
    """User-agent группы должен быть непустой строкой."""


class InvalidRuleType(RobotsTxtError, TypeError):
    """Ожидался экземпляр Rule."""


class InvalidGroupType(RobotsTxtError, TypeError):
    """Ожидался экземпляр Group."""


class InvalidDocumentType(RobotsTxtError, TypeError):
    """Ожидался экземпляр RobotsTxt."""


class InvalidURLType(RobotsTxtError, TypeError):
    """URL карты сайта должен быть строкой."""


class InvalidHostType(RobotsTxtError, TypeError):
    """Host должен быть строкой."""


class InvalidPayload(RobotsTxtError, TypeError):
    """JSON-данные имеют неверную структуру (не объект, не список и т.п.)."""


class EmptyDocument(RobotsTxtError, ValueError):
    """Попытка сериализовать документ без групп без флага force."""
