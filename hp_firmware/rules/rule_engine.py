"""
Compliance rule engine.

Dispatches each record to the rule set of its device class.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from .base_rule import EvaluationResult, RuleSet
from .controller_rules import CONTROLLER_RULES
from .drive_rules import DRIVE_RULES
from .ilo_rules import ILO_RULES
from ..exceptions import ConfigurationError
from ..models import DeviceClass

logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Evaluates typed records against static rule sets.

    Design Pattern: Registry Pattern
    Rule sets are injected once and only read afterwards.
    """

    def __init__(self, rule_sets: Iterable[RuleSet]):
        """
        Initialize engine.

        Args:
            rule_sets: One rule set per device class
        """
        self._rule_sets: Dict[DeviceClass, RuleSet] = {}
        for rule_set in rule_sets:
            if rule_set.device_class in self._rule_sets:
                raise ConfigurationError(f"Duplicate rule set for {rule_set.device_class.value}")
            self._rule_sets[rule_set.device_class] = rule_set

    @classmethod
    def default(cls) -> 'RuleEngine':
        """Engine with the built-in drive, controller and iLO rules"""
        return cls([DRIVE_RULES, CONTROLLER_RULES, ILO_RULES])

    def supports(self, device_class: DeviceClass) -> bool:
        return device_class in self._rule_sets

    def evaluate(self, record) -> EvaluationResult:
        """
        Evaluate one record.

        Args:
            record: PhysicalDrive, Controller or Ilo

        Returns:
            Evaluation result

        Raises:
            ConfigurationError: If no rule set exists for the record's device class
        """
        rule_set = self._rule_sets.get(record.device_class)
        if rule_set is None:
            raise ConfigurationError(f"No rules configured for {record.device_class.value}")

        return rule_set.evaluate(record)

    def evaluate_all(self, records: Iterable) -> List[Tuple[object, EvaluationResult]]:
        """Evaluate records in order, returning (record, result) pairs"""
        return [(record, self.evaluate(record)) for record in records]
