import pytest

from hp_firmware.exceptions import ConfigurationError
from hp_firmware.models import Controller, DeviceClass, Ilo, LogicalDrive, PhysicalDrive, Status
from hp_firmware.rules import DRIVE_RULES, EvaluationResult, Rule, RuleEngine, RuleSet, StatusNotOkMatcher


def test_default_engine_dispatches_by_device_class():
    engine = RuleEngine.default()

    assert engine.supports(DeviceClass.DRIVE)
    assert engine.supports(DeviceClass.CONTROLLER)
    assert engine.supports(DeviceClass.ILO)
    assert not engine.supports(DeviceClass.LOGICAL_DRIVE)


def test_evaluate_all_keeps_record_order():
    records = [
        Ilo(model="ilo5", firmware="2.10"),
        Controller(id="0", model="p408i-a", firmware="2.65", status="ok"),
        PhysicalDrive(id="0.1", model="VO0480JFDGT", firmware="HPD1", status="ok"),
    ]

    evaluated = RuleEngine.default().evaluate_all(records)

    assert [record for record, _ in evaluated] == records
    assert [result.status for _, result in evaluated] == [Status.CRITICAL, Status.OK, Status.CRITICAL]


def test_record_without_rule_set_raises():
    with pytest.raises(ConfigurationError):
        RuleEngine.default().evaluate(LogicalDrive(id="0.1", controller_id="0", raid_type="1"))


def test_duplicate_rule_set_raises():
    with pytest.raises(ConfigurationError):
        RuleEngine([DRIVE_RULES, DRIVE_RULES])


def test_first_matching_rule_wins():
    rule_set = RuleSet(
        device_class=DeviceClass.DRIVE,
        rules=(
            Rule(name="first", matchers=(StatusNotOkMatcher(),), status=Status.WARNING, message="first"),
            Rule(name="second", matchers=(StatusNotOkMatcher(),), status=Status.CRITICAL, message="second"),
        )
    )
    record = PhysicalDrive(id="1", status="failed")

    result = RuleEngine([rule_set]).evaluate(record)

    assert result == EvaluationResult(Status.WARNING, f"{record.describe()} - first")
