# File: robots_builder/model/rule.py
"""robots_builder.model.rule: Одна директива robots.txt (например, ``Disallow: /admin``)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from robots_builder.errors import InvalidDirective, InvalidValueType
from robots_builder.utils import JSONInput, load_json_object

__all__ = ["Directive", "Rule", "RuleValue"]

RuleValue = Union[str, int, float]


class Directive(str, Enum):
    """Поддерживаемые директивы. Регистр значим."""

    ALLOW = "Allow"
    DISALLOW = "Disallow"
    CRAWL_DELAY = "Crawl-delay"


def _format_value(value: RuleValue) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True, slots=True)
class Rule:
    """Неизменяемая пара (directive, value); равенство правил определяется этой парой."""

    directive: str
    value: RuleValue

    def __post_init__(self) -> None:
        directive = self.directive
        if not isinstance(directive, str):
            raise InvalidDirective(directive)
        try:
            directive = Directive(directive).value
        except ValueError:
            raise InvalidDirective(directive) from None
        # bool is an int subclass but not a robots.txt value
        if isinstance(self.value, bool) or not isinstance(self.value, (str, int, float)):
            raise InvalidValueType(self.value)
        object.__setattr__(self, "directive", directive)

    @classmethod
    def allow(cls, path: str) -> Rule:
        return cls(Directive.ALLOW, path)

    @classmethod
    def disallow(cls, path: str) -> Rule:
        return cls(Directive.DISALLOW, path)

    @classmethod
    def crawl_delay(cls, seconds: Union[int, float]) -> Rule:
        return cls(Directive.CRAWL_DELAY, seconds)

    def to_json(self) -> Dict[str, Any]:
        return {"directive": self.directive, "value": self.value}

    @classmethod
    def from_json(cls, data: JSONInput) -> Rule:
        """Создаёт правило из JSON-строки или словаря ``{directive, value}``."""
        payload = load_json_object(data, "rule")
        return cls(payload.get("directive"), payload.get("value"))

    def output(self) -> str:
        value = _format_value(self.value)
        if not value:
            # "Disallow:" with an empty value allows everything
            return f"{self.directive}:"
        return f"{self.directive}: {value}"

    def __str__(self) -> str:
        return self.output()
