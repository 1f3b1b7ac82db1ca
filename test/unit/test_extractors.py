import pytest

from hp_firmware.exceptions import NoDataError
from hp_firmware.extractors import ControllerExtractor, DriveExtractor, IloExtractor, LogicalDriveExtractor
from hp_firmware.models import Controller, Ilo, PhysicalDrive, SnmpSample
from hp_firmware.tables import CONTROLLER_SCHEMA, DRIVE_SCHEMA, ILO_SCHEMA, LOGICAL_DRIVE_SCHEMA, SnmpTable

CNTLR = CONTROLLER_SCHEMA.oid
LOG_DRV = LOGICAL_DRIVE_SCHEMA.oid
PHY_DRV = DRIVE_SCHEMA.oid
SM2 = ILO_SCHEMA.oid


def table(schema, *samples):
    return SnmpTable.from_samples(schema, [SnmpSample(oid=oid, value=value) for oid, value in samples])


def test_drive_extraction():
    drives = DriveExtractor().extract(table(
        DRIVE_SCHEMA,
        (f"{PHY_DRV}.3.0.1", "VO0480JFDGT"),
        (f"{PHY_DRV}.4.0.1", "HPD1"),
        (f"{PHY_DRV}.6.0.1", "2"),
        (f"{PHY_DRV}.9.0.1", "1337"),
        (f"{PHY_DRV}.51.0.1", "ABC123 "),
        (f"{PHY_DRV}.64.0.1", "1I:1:1"),
    ))

    assert drives == [PhysicalDrive(
        id="0.1",
        model="VO0480JFDGT",
        firmware="HPD1",
        serial="ABC123",
        status="ok",
        hours=1337,
        location="1I:1:1"
    )]


def test_drive_fields_degrade_instead_of_failing():
    drive = DriveExtractor().extract(table(
        DRIVE_SCHEMA,
        (f"{PHY_DRV}.3.0.2", "EG0600JETKA"),
        (f"{PHY_DRV}.9.0.2", "n/a"),
    ))[0]

    assert drive.hours == "n/a"
    assert drive.firmware == ""
    assert drive.status is None
    assert "hours=n/a" in drive.describe()


def test_unknown_drive_status_is_kept_raw():
    drive = DriveExtractor().extract(table(DRIVE_SCHEMA, (f"{PHY_DRV}.6.1.1", "42")))[0]

    assert drive.status == "42"


def test_empty_table_raises_no_data():
    with pytest.raises(NoDataError) as exc_info:
        DriveExtractor().extract(SnmpTable(DRIVE_SCHEMA))

    assert str(exc_info.value) == "No HP drive data found!"
    assert exc_info.value.device_class == "drive"


def test_raid_types_are_grouped_per_controller():
    raid_types = LogicalDriveExtractor().extract_raid_types(table(
        LOGICAL_DRIVE_SCHEMA,
        (f"{LOG_DRV}.1.0.1", "0"),
        (f"{LOG_DRV}.3.0.1", "3"),
        (f"{LOG_DRV}.1.0.2", "0"),
        (f"{LOG_DRV}.3.0.2", "5"),
        (f"{LOG_DRV}.1.0.3", "0"),
        (f"{LOG_DRV}.3.0.3", "3"),
        (f"{LOG_DRV}.3.1.1", "10"),
    ))

    # controller '1' comes from the row index, its column is missing
    assert raid_types == {"0": ("1", "5"), "1": ("1ADM",)}


def test_raid_types_unknown_without_logical_drives():
    assert LogicalDriveExtractor().extract_raid_types(SnmpTable(LOGICAL_DRIVE_SCHEMA)) is None


def test_controller_extraction():
    controllers = ControllerExtractor({"0": ("1",)}).extract(table(
        CONTROLLER_SCHEMA,
        (f"{CNTLR}.2.0", "98"),
        (f"{CNTLR}.3.0", "2.62"),
        (f"{CNTLR}.6.0", "2"),
        (f"{CNTLR}.15.0", "PEYHB0ARH9Z0GD"),
        (f"{CNTLR}.20.0", "Slot 0"),
        (f"{CNTLR}.2.3", "250"),
    ))

    assert controllers[0] == Controller(
        id="0",
        model="p408i-a",
        firmware="2.62",
        serial="PEYHB0ARH9Z0GD",
        status="ok",
        location="Slot 0",
        raid_types=("1",)
    )
    # unknown model id stays raw, no logical drives on this controller
    assert controllers[1].model == "250"
    assert controllers[1].raid_types == ()


def test_controller_raid_unknown():
    controller = ControllerExtractor().extract(table(CONTROLLER_SCHEMA, (f"{CNTLR}.2.0", "98")))[0]

    assert controller.raid_types is None


def test_ilo_extraction():
    ilo = IloExtractor().extract_one(table(
        ILO_SCHEMA,
        (f"{SM2}.2.0", "2.78"),
        (f"{SM2}.21.0", "11"),
    ))

    assert ilo == Ilo(model="ilo5", firmware="2.78")
    assert ilo.describe() == "Integrated Lights-Out iLO 5 revision 2.78"


def test_ilo_without_values_raises_no_data():
    with pytest.raises(NoDataError, match="No HP iLO data found!"):
        IloExtractor().extract_one(table(ILO_SCHEMA, (f"{SM2}.2.0", "")))

    with pytest.raises(NoDataError):
        IloExtractor().extract_one(SnmpTable(ILO_SCHEMA))


def test_ilo_model_normalization():
    assert Ilo.normalize_model("iLO 5") == "ilo5"
    assert Ilo.normalize_model("Integrated Lights-Out 4") == "ilo4"
    assert Ilo.normalize_model("ilo3") == "ilo3"
    assert Ilo.normalize_model(" OA ") == "OA"
    assert Ilo.normalize_model(None) == ""
