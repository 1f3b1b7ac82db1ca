"""
Compliance rules engine - ordered, first-match-wins vulnerability rules.
"""

from .base_rule import EvaluationResult, Rule, RuleSet
from .matchers import (
    Matcher,
    StatusNotOkMatcher,
    ModelMatcher,
    FirmwareInvalidMatcher,
    FirmwareAtLeastMatcher,
    FirmwareBelowMatcher,
    FirmwareRangeMatcher,
    RaidTypeMatcher,
    RaidUnknownMatcher,
)
from .drive_rules import DRIVE_RULES
from .controller_rules import CONTROLLER_RULES
from .ilo_rules import ILO_RULES
from .rule_engine import RuleEngine

__all__ = [
    'EvaluationResult',
    'Rule',
    'RuleSet',
    'Matcher',
    'StatusNotOkMatcher',
    'ModelMatcher',
    'FirmwareInvalidMatcher',
    'FirmwareAtLeastMatcher',
    'FirmwareBelowMatcher',
    'FirmwareRangeMatcher',
    'RaidTypeMatcher',
    'RaidUnknownMatcher',
    'DRIVE_RULES',
    'CONTROLLER_RULES',
    'ILO_RULES',
    'RuleEngine',
]
