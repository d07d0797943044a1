# robots_builder/__init__.py
"""
robots_builder package initializer.
Defines package version and exposes the robots.txt model.
"""
__version__ = "0.1.0"

from .config import OutputOptions, load_options
from .errors import (
    EmptyDocument,
    InvalidAgentType,
    InvalidDirective,
    InvalidDocumentType,
    InvalidGroupType,
    InvalidHostType,
    InvalidPayload,
    InvalidRuleType,
    InvalidURLType,
    InvalidValueType,
    RobotsTxtError,
)
from .model import Directive, Group, RobotsTxt, Rule

__all__ = [
    "__version__",
    "Directive",
    "Rule",
    "Group",
    "RobotsTxt",
    "OutputOptions",
    "load_options",
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
