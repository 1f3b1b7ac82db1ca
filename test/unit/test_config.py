import pytest

from hp_firmware.config import AppConfig, SnmpConfig, validate_config
from hp_firmware.exceptions import ConfigurationError


def test_snmp_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SNMP_HOST", "192.0.2.10")
    monkeypatch.setenv("SNMP_PORT", "1161")
    monkeypatch.setenv("SNMP_COMMUNITY", "secret")
    monkeypatch.delenv("SNMP_PROTOCOL", raising=False)

    settings = SnmpConfig.get_settings()

    assert settings["host"] == "192.0.2.10"
    assert settings["port"] == 1161
    assert settings["community"] == "secret"
    assert settings["protocol"] == "2c"


def test_valid_config_passes():
    validate_config({"timeout": 15, "port": 161}, {"host": None})


@pytest.mark.parametrize("settings", [{"timeout": 0}, {"port": 70000}])
def test_invalid_snmp_settings(settings):
    with pytest.raises(ConfigurationError):
        validate_config(settings)


def test_redfish_host_needs_credentials():
    with pytest.raises(ConfigurationError, match="missing username/password"):
        validate_config({}, {"host": "ilo.example", "username": "admin", "password": None})


def test_build_version(monkeypatch):
    monkeypatch.setenv("GIT_COMMIT", "abc1234")

    assert AppConfig.build_version() == f"{AppConfig.APP_VERSION} - abc1234"
