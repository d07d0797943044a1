# File: robots_builder/model/group.py
"""robots_builder.model.group: Блок правил для одного User-agent."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Union

from robots_builder.errors import InvalidAgentType, InvalidGroupType, InvalidRuleType
from robots_builder.logger import logger
from robots_builder.model.rule import Rule
from robots_builder.utils import JSONInput, ensure_list, load_json_object

__all__ = ["Group"]


class Group:
    """Группа директив для одного User-agent.

    Правила хранятся в порядке добавления, без повторов пары
    (directive, value). Слияние с группой другого агента ничего не делает:
    это позволяет вызывающему коду перебирать все пары групп в цикле
    без предварительной фильтрации.
    """

    def __init__(self, agent: str, rules: Iterable[Rule] = ()) -> None:
        """Инициализирует группу именем агента и необязательными правилами."""
        if not isinstance(agent, str) or not agent:
            raise InvalidAgentType(f"agent must be a non-empty string, got {agent!r}")
        self._agent: str = agent
        self._rules: List[Rule] = []
        for rule in rules:
            self.add_rule(rule)

    @property
    def agent(self) -> str:
        """Имя агента, только для чтения."""
        return self._agent

    @property
    def rules(self) -> List[Rule]:
        """Копия списка правил; добавление только через add_rule."""
        return list(self._rules)

    def add_rule(self, rule: Rule) -> Group:
        """Добавляет правило, если такой пары (directive, value) ещё нет."""
        if not isinstance(rule, Rule):
            raise InvalidRuleType(f"add_rule() expects a Rule instance, got {type(rule).__name__}")
        if rule not in self._rules:
            self._rules.append(rule)
        return self

    def merge(self, other: Group) -> Group:
        """Добавляет правила other, если агенты совпадают."""
        if not isinstance(other, Group):
            raise InvalidGroupType(f"merge() expects a Group instance, got {type(other).__name__}")
        if other.agent != self.agent:
            logger.debug("Ignored merge of group %r into %r", other.agent, self.agent)
            return self
        for rule in other:
            self.add_rule(rule)
        logger.debug("Merged %d rule(s) into group %r", len(other), self.agent)
        return self

    def add_allow(self, path: str) -> Group:
        return self.add_rule(Rule.allow(path))

    def add_disallow(self, path: str) -> Group:
        return self.add_rule(Rule.disallow(path))

    def add_crawl_delay(self, seconds: Union[int, float]) -> Group:
        return self.add_rule(Rule.crawl_delay(seconds))

    # short aliases for chained building: doc.agent("*").allow("/").delay(5)
    allow = add_allow
    disallow = add_disallow
    delay = add_crawl_delay

    def copy(self) -> Group:
        """Независимая копия группы (правила неизменяемы и разделяются)."""
        clone = type(self)(self._agent)
        clone._rules = list(self._rules)
        return clone

    def to_json(self) -> Dict[str, Any]:
        return {"agent": self.agent, "rules": [rule.to_json() for rule in self._rules]}

    @classmethod
    def from_json(cls, data: JSONInput) -> Group:
        """Восстанавливает группу из JSON; повторные правила отбрасываются."""
        payload = load_json_object(data, "group")
        rules = [Rule.from_json(item) for item in ensure_list(payload, "rules")]
        return cls(payload.get("agent"), rules)

    def output(self) -> str:
        lines = [f"User-agent: {self.agent}"]
        lines.extend(rule.output() for rule in self._rules)
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self._agent == other._agent and self._rules == other._rules

    def __repr__(self) -> str:
        return f"<Group agent={self.agent!r} rules={len(self._rules)}>"
