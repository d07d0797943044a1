"""robots_builder.model: Модель robots.txt — правила, группы и документ."""

from .document import RobotsTxt
from .group import Group
from .rule import Directive, Rule

__all__ = ["Directive", "Rule", "Group", "RobotsTxt"]
