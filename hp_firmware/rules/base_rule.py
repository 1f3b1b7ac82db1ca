"""
Rule and rule set definitions.

Rules of a set are evaluated top to bottom and the first match wins, so the
authoring order of a rule set is part of its meaning.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from .matchers import Matcher
from ..models import DeviceClass, Status

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    """
    Result of evaluating one record.

    Attributes:
        status: Check status
        message: Human-readable explanation
    """
    status: Status
    message: str


@dataclass(frozen=True)
class Rule:
    """
    Vulnerability rule.

    Attributes:
        name: Short identifier for logging
        matchers: All must match for the rule to apply
        status: Resulting status
        message: Message template, formatted with the record as 'record'
    """
    name: str
    matchers: Tuple[Matcher, ...]
    status: Status
    message: str

    def matches(self, record) -> bool:
        return all(matcher.matches(record) for matcher in self.matchers)

    def apply(self, record) -> EvaluationResult:
        message = self.message.format(record=record)
        return EvaluationResult(self.status, f"{record.describe()} - {message}")


@dataclass(frozen=True)
class RuleSet:
    """
    Ordered rules for one device class.

    Attributes:
        device_class: Records this set applies to
        rules: Rules in evaluation order
        default_message: Note appended to the OK result when no rule matches
    """
    device_class: DeviceClass
    rules: Tuple[Rule, ...]
    default_message: str = ""

    def evaluate(self, record) -> EvaluationResult:
        """
        Evaluate a record against the rules.

        Args:
            record: Typed record of this set's device class

        Returns:
            Result of the first matching rule, OK with a neutral description otherwise
        """
        for rule in self.rules:
            if rule.matches(record):
                logger.debug(f"Rule '{rule.name}' matched {record.describe()}")
                return rule.apply(record)

        message = record.describe()
        if self.default_message:
            message = f"{message} - {self.default_message}"
        return EvaluationResult(Status.OK, message)
