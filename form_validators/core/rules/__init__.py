"""
Rule pipeline and validator option management.
"""

from .rule_config import DEFAULT_OPTIONS, PatternOverride, RuleConfigLoader, ValidatorOptions
from .rule_pipeline import RULE_ORDER, RulePipeline, build_rules, default_rules

__all__ = [
    "RulePipeline",
    "build_rules",
    "default_rules",
    "RULE_ORDER",
    "RuleConfigLoader",
    "ValidatorOptions",
    "PatternOverride",
    "DEFAULT_OPTIONS",
]
