import pytest

from hp_firmware.models import Controller, Status
from hp_firmware.rules import CONTROLLER_RULES


def controller(model="p408i-a", firmware="2.60", status="ok", raid_types=("1",)) -> Controller:
    return Controller(
        id="0",
        model=model,
        firmware=firmware,
        serial="PEYHB0ARH9Z0GD",
        status=status,
        location="Slot 0",
        raid_types=raid_types
    )


def test_affected_with_mirrored_raid_is_critical():
    result = CONTROLLER_RULES.evaluate(controller())

    assert result.status == Status.CRITICAL
    assert result.message.startswith("controller (0) model=p408i-a serial=PEYHB0ARH9Z0GD firmware=2.60 - ")
    assert "in affected version range!" in result.message
    assert "RAID 1/10/ADM" in result.message
    assert "RAID 5/6/50/60" not in result.message


def test_affected_with_parity_raid_is_critical():
    result = CONTROLLER_RULES.evaluate(controller(raid_types=("0", "5")))

    assert result.status == Status.CRITICAL
    assert "RAID 5/6/50/60" in result.message
    assert "RAID 1/10/ADM" not in result.message


def test_unknown_raid_configuration_names_both_groups():
    result = CONTROLLER_RULES.evaluate(controller(raid_types=None))

    assert result.status == Status.CRITICAL
    assert "RAID 1/10/ADM" in result.message
    assert "RAID 5/6/50/60" in result.message


@pytest.mark.parametrize("raid_types", [(), ("0",)])
def test_affected_without_affected_raid_is_warning(raid_types):
    result = CONTROLLER_RULES.evaluate(controller(raid_types=raid_types))

    assert result.status == Status.WARNING
    assert "no affected RAID configured - update to 2.65 recommended" in result.message


@pytest.mark.parametrize("firmware", ["1.98", "2.62"])
def test_range_bounds_are_affected(firmware):
    assert CONTROLLER_RULES.evaluate(controller(firmware=firmware)).status == Status.CRITICAL


def test_fixed_firmware_is_ok():
    result = CONTROLLER_RULES.evaluate(controller(firmware="2.65"))

    assert result.status == Status.OK
    assert result.message.endswith("firmware has been updated")


def test_older_firmware_is_ok():
    result = CONTROLLER_RULES.evaluate(controller(firmware="1.65"))

    assert result.status == Status.OK
    assert result.message.endswith("firmware older than affected")


def test_unaffected_model_is_ok():
    record = controller(model="p440ar")

    result = CONTROLLER_RULES.evaluate(record)

    assert result.status == Status.OK
    assert result.message == record.describe()


def test_failed_controller_is_critical():
    result = CONTROLLER_RULES.evaluate(controller(firmware="2.65", status="degraded"))

    assert result.status == Status.CRITICAL
    assert result.message.endswith("status: degraded")


def test_unreadable_firmware_on_affected_model_is_warning():
    result = CONTROLLER_RULES.evaluate(controller(firmware=""))

    assert result.status == Status.WARNING


def test_undetermined_status_is_not_a_failure():
    result = CONTROLLER_RULES.evaluate(controller(firmware="2.65", status="other"))

    assert result.status == Status.OK
    assert result.message.endswith("firmware has been updated")
