import pytest

from hp_firmware.models import Ilo, Status
from hp_firmware.rules import ILO_RULES


@pytest.mark.parametrize("model,firmware,floor", [
    ("ilo3", "1.90", "1.93"),
    ("ilo4", "2.70", "2.75"),
    ("ilo5", "2.10", "2.18"),
])
def test_firmware_below_floor_is_critical(model, firmware, floor):
    result = ILO_RULES.evaluate(Ilo(model=model, firmware=firmware))

    assert result.status == Status.CRITICAL
    assert result.message.endswith(f"version too old, should be at least {floor}")


@pytest.mark.parametrize("model,firmware", [("ilo3", "1.93"), ("ilo4", "2.78"), ("ilo5", "2.18")])
def test_firmware_at_or_above_floor_is_ok(model, firmware):
    result = ILO_RULES.evaluate(Ilo(model=model, firmware=firmware))

    assert result.status == Status.OK
    assert result.message.endswith("version newer than affected")


def test_message_describes_the_ilo():
    result = ILO_RULES.evaluate(Ilo(model="ilo5", firmware="2.10"))

    assert result.message.startswith("Integrated Lights-Out iLO 5 revision 2.10 - ")


def test_unknown_product_line_is_ok_with_note():
    result = ILO_RULES.evaluate(Ilo(model="ilo6", firmware="1.10"))

    assert result.status == Status.OK
    assert result.message == (
        "Integrated Lights-Out iLO 6 revision 1.10 - no known vulnerable firmware for this model"
    )


def test_unreadable_firmware_is_warning():
    result = ILO_RULES.evaluate(Ilo(model="ilo4", firmware=""))

    assert result.status == Status.WARNING
