import json

import pytest

from hp_firmware import cli


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("GIT_COMMIT", "ILO_REDFISH_HOST", "ILO_REDFISH_USERNAME", "ILO_REDFISH_PASSWORD",
                 "SNMP_PORT", "SNMP_TIMEOUT", "SNMP_PROTOCOL"):
        monkeypatch.delenv(name, raising=False)


def test_critical_capture_exits_2(write_capture, capsys):
    code = cli.main(["--snmpwalk-file", str(write_capture())])

    lines = capsys.readouterr().out.splitlines()
    assert code == 2
    assert lines[0] == "[CRITICAL] - Found 2 critical problems"
    assert lines[1].startswith("[OK] Integrated Lights-Out iLO 5 revision 2.78")
    assert len(lines) == 5


def test_patched_capture_exits_0(write_capture, capture_text, capsys):
    patched = capture_text.replace('"2.62"', '"2.65"').replace('"HPD1"', '"HPD8"')

    code = cli.main(["--snmpwalk-file", str(write_capture(patched))])

    assert code == 0
    assert capsys.readouterr().out.startswith("[OK] - All 1 controllers and 2 drives seem fine")


def test_ignore_ilo_version(write_capture, capsys):
    cli.main(["--snmpwalk-file", str(write_capture()), "--ignore-ilo-version"])

    assert "Lights-Out" not in capsys.readouterr().out


def test_json_output(write_capture, capsys):
    code = cli.main(["--snmpwalk-file", str(write_capture()), "--format", "json"])

    data = json.loads(capsys.readouterr().out)
    assert code == 2
    assert data["exit_code"] == 2
    assert data["drives"] == 2


def test_version_exits_unknown(capsys):
    code = cli.main(["--version"])

    assert code == 3
    assert capsys.readouterr().out.strip() == "check_hp_firmware version 1.0.0"


def test_snmpv3_is_unknown(capsys):
    code = cli.main(["-H", "192.0.2.10", "-P", "3"])

    assert code == 3
    assert capsys.readouterr().out.strip() == "[UNKNOWN] - SNMPv3 is not supported"


def test_missing_capture_is_unknown(tmp_path, capsys):
    code = cli.main(["--snmpwalk-file", str(tmp_path / "missing.txt")])

    assert code == 3
    assert capsys.readouterr().out.startswith("[UNKNOWN] - Could not read snmpwalk file")


def test_empty_capture_is_unknown(write_capture, capsys):
    code = cli.main(["--snmpwalk-file", str(write_capture(""))])

    assert code == 3
    assert capsys.readouterr().out.strip() == "[UNKNOWN] - No HP controller or drive data found!"


def test_bad_arguments_exit_unknown():
    assert cli.main(["--no-such-flag"]) == 3


def test_unexpected_error(monkeypatch, write_capture, capsys):
    def broken(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(cli, "initialize_check", broken)

    code = cli.main(["--snmpwalk-file", str(write_capture())])

    assert code == 3
    assert capsys.readouterr().out.strip() == "[UNKNOWN] - Unexpected error: boom"


def test_unexpected_error_is_raised_with_debug(monkeypatch, write_capture):
    def broken(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(cli, "initialize_check", broken)

    with pytest.raises(RuntimeError):
        cli.main(["--snmpwalk-file", str(write_capture()), "--debug"])
