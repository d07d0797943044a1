# File: robots_builder/model/document.py
"""robots_builder.model.document: Полный документ robots.txt.

Документ хранит группы по имени агента (одна группа на агента, порядок
первого появления), упорядоченное множество карт сайта и необязательный
Host. Пример::

    robots = RobotsTxt()
    robots.agent("*").allow("/").disallow("/private")
    robots.sitemap("https://example.com/sitemap.xml")
    print(robots.output())
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from robots_builder.config import OptionsLike, resolve_options
from robots_builder.errors import (
    EmptyDocument,
    InvalidDocumentType,
    InvalidGroupType,
    InvalidHostType,
    InvalidURLType,
)
from robots_builder.logger import logger
from robots_builder.model.group import Group
from robots_builder.utils import JSONInput, ensure_list, load_json_object

__all__ = ["RobotsTxt"]


def _check_sitemap(url: Any) -> str:
    if not isinstance(url, str):
        raise InvalidURLType(f"Sitemap URL must be a string, got {type(url).__name__}")
    return url


def _check_host(host: Any) -> str:
    if not isinstance(host, str):
        raise InvalidHostType(f"Host must be a string, got {type(host).__name__}")
    return host


class RobotsTxt:
    """Корневая модель robots.txt: группы, карты сайта и Host."""

    def __init__(self) -> None:
        self._groups: Dict[str, Group] = {}
        self._sitemaps: Dict[str, None] = {}
        self.host: Optional[str] = None

    # ------------------------------------------------------------------ #
    # Accessors                                                          #
    # ------------------------------------------------------------------ #

    @property
    def groups(self) -> List[Group]:
        """Снимок списка групп в порядке первого появления агента."""
        return list(self._groups.values())

    @property
    def sitemaps(self) -> List[str]:
        return list(self._sitemaps)

    @property
    def agents(self) -> List[str]:
        return list(self._groups)

    def get_group(self, agent: str) -> Optional[Group]:
        return self._groups.get(agent)

    def __contains__(self, agent: object) -> bool:
        return agent in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RobotsTxt):
            return NotImplemented
        return self.to_json() == other.to_json()

    def __repr__(self) -> str:
        return (
            f"<RobotsTxt groups={len(self._groups)} "
            f"sitemaps={len(self._sitemaps)} host={self.host!r}>"
        )

    # ------------------------------------------------------------------ #
    # Mutation                                                           #
    # ------------------------------------------------------------------ #

    def add_group(self, group: Group) -> RobotsTxt:
        """Добавляет группу; группа с уже известным агентом сливается с существующей.

        Документ хранит собственную копию, переданный объект не разделяется.
        """
        if not isinstance(group, Group):
            raise InvalidGroupType(
                f"add_group() expects a Group instance, got {type(group).__name__}"
            )
        existing = self._groups.get(group.agent)
        if existing is not None:
            existing.merge(group)
        else:
            self._groups[group.agent] = group.copy()
            logger.debug("Added group %r", group.agent)
        return self

    def add_group_from_json(self, data: JSONInput) -> RobotsTxt:
        return self.add_group(Group.from_json(data))

    def merge(self, other: RobotsTxt) -> RobotsTxt:
        """Сливает другой документ: группы, карты сайта и Host (если задан у other)."""
        if not isinstance(other, RobotsTxt):
            raise InvalidDocumentType(
                f"merge() expects a RobotsTxt instance, got {type(other).__name__}"
            )
        for group in other.groups:
            self.add_group(group)
        for url in other.sitemaps:
            self._sitemaps[url] = None
        if other.host is not None:
            self.host = other.host
        logger.debug("Merged document with %d group(s)", len(other))
        return self

    def add_fragment(self, data: JSONInput) -> RobotsTxt:
        """Добавляет фрагмент ``{groups, sitemaps, host}`` из JSON.

        Фрагмент проверяется целиком до применения: при ошибке документ не меняется.
        """
        payload = load_json_object(data, "fragment")
        groups = [Group.from_json(item) for item in ensure_list(payload, "groups")]
        sitemaps = [_check_sitemap(url) for url in ensure_list(payload, "sitemaps")]
        host = payload.get("host")
        if host is not None:
            _check_host(host)

        for group in groups:
            self.add_group(group)
        for url in sitemaps:
            self._sitemaps[url] = None
        if host is not None:
            self.host = host
        return self

    def add_sitemap(self, url: str) -> RobotsTxt:
        self._sitemaps[_check_sitemap(url)] = None
        return self

    def set_host(self, host: str) -> RobotsTxt:
        self.host = _check_host(host)
        return self

    # ------------------------------------------------------------------ #
    # Fluent builder                                                     #
    # ------------------------------------------------------------------ #

    def agent(self, name: str) -> Group:
        """Возвращает группу документа для name, создавая её при первом обращении."""
        group = self._groups.get(name)
        if group is None:
            group = Group(name)
            self._groups[name] = group
        return group

    def sitemap(self, url: str) -> RobotsTxt:
        return self.add_sitemap(url)

    # ------------------------------------------------------------------ #
    # Serialization                                                      #
    # ------------------------------------------------------------------ #

    def output(self, options: OptionsLike = None, *, force: Optional[bool] = None) -> str:
        """Сериализует документ в текст robots.txt.

        Документ без групп вызывает EmptyDocument, если не передан force=True
        (аргументом или через OutputOptions).
        """
        opts = resolve_options(options, force=force)
        if not self._groups and not opts.force:
            raise EmptyDocument(
                "robots.txt has no User-agent groups; pass force=True to output anyway"
            )

        lines: List[str] = ["\n\n".join(group.output() for group in self._groups.values())]

        if self.host is not None or self._sitemaps:
            lines.append("")
        if self.host is not None:
            lines.append(f"Host: {self.host}" if self.host else "Host:")
        lines.extend(f"Sitemap: {url}" for url in self._sitemaps)

        text = "\n".join(lines).strip()
        logger.debug(
            "Rendered robots.txt: %d group(s), %d sitemap(s)", len(self._groups), len(self._sitemaps)
        )
        return text

    def __str__(self) -> str:
        return self.output(force=True)

    def to_json(self) -> Dict[str, Any]:
        return {
            "groups": [group.to_json() for group in self._groups.values()],
            "sitemaps": list(self._sitemaps),
            "host": self.host,
        }

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-строку документа."""
        return json.dumps(self.to_json(), ensure_ascii=False, indent=2 if pretty else None)

    @classmethod
    def from_json(cls, data: JSONInput) -> RobotsTxt:
        """Создаёт независимый документ из JSON-строки или словаря."""
        robots = cls()
        robots.add_fragment(data)
        return robots
