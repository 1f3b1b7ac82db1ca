"""
Settings of the check plugin.

Values come from the environment (or a .env file) and are overridden by
command line flags in cli.py. Stdout belongs to the plugin output, so all
logging goes to stderr or a log file.
"""

import os
import sys
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def load_environment(env_file: Optional[str] = None):
    """
    Read settings from a .env file into the environment.

    Args:
        env_file: Explicit .env path. Its values win over the environment.
            Without it the default .env lookup is used.
    """
    if not env_file:
        load_dotenv()
        return

    env_path = Path(env_file)
    if not env_path.exists():
        logger.warning(f"Settings file not found: {env_file}")
        return

    load_dotenv(env_path, override=True)
    logger.info(f"Settings loaded from {env_file}")


class AppConfig:
    """Plugin identity"""

    APP_NAME = "check_hp_firmware"
    APP_VERSION = "1.0.0"
    APP_DESCRIPTION = (
        "Icinga / Nagios check plugin to verify HPE controllers, SSD disks and iLO "
        "are not affected by certain vulnerabilities"
    )

    @classmethod
    def build_version(cls) -> str:
        """Version string, with the git commit when built from a checkout"""
        git_commit = os.getenv("GIT_COMMIT")
        if git_commit:
            return f"{cls.APP_VERSION} - {git_commit}"
        return cls.APP_VERSION


class SnmpConfig:
    """SNMP source defaults and their environment variables"""

    DEFAULT_HOST = "localhost"
    DEFAULT_PORT = 161
    DEFAULT_COMMUNITY = "public"
    DEFAULT_PROTOCOL = "2c"
    DEFAULT_TIMEOUT = 15
    DEFAULT_RETRIES = 1

    @classmethod
    def get_settings(cls) -> dict:
        """Build SNMP strategy settings, read at call time"""
        return {
            "host": os.getenv("SNMP_HOST", cls.DEFAULT_HOST),
            "port": int(os.getenv("SNMP_PORT", str(cls.DEFAULT_PORT))),
            "community": os.getenv("SNMP_COMMUNITY", cls.DEFAULT_COMMUNITY),
            "protocol": os.getenv("SNMP_PROTOCOL", cls.DEFAULT_PROTOCOL),
            "timeout": int(os.getenv("SNMP_TIMEOUT", str(cls.DEFAULT_TIMEOUT))),
            "retries": cls.DEFAULT_RETRIES,
            "ip_version": None,
        }


class RedfishConfig:
    """Optional iLO Redfish access"""

    DEFAULT_TIMEOUT = 30

    @classmethod
    def get_credentials(cls) -> dict:
        return {
            "host": os.getenv("ILO_REDFISH_HOST"),
            "username": os.getenv("ILO_REDFISH_USERNAME"),
            "password": os.getenv("ILO_REDFISH_PASSWORD"),
        }

    @classmethod
    def get_timeout(cls) -> int:
        return int(os.getenv("ILO_REDFISH_TIMEOUT", str(cls.DEFAULT_TIMEOUT)))


class LogConfig:
    """Log levels, formats and the optional rotating log file"""

    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    DEBUG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(filename)s:%(lineno)d]: %(message)s"
    DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    LOG_FILE = os.getenv("LOG_FILE")
    LOG_FILE_MAX_BYTES = int(os.getenv("LOG_FILE_MAX_BYTES", str(5 * 1024 * 1024)))
    LOG_FILE_BACKUP_COUNT = int(os.getenv("LOG_FILE_BACKUP_COUNT", "3"))


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    Configure the root logger.

    Args:
        verbose: Log at DEBUG with file/line information (--debug)
        log_file: Also log to this rotating file, defaults to LOG_FILE
    """
    level = logging.DEBUG if verbose else getattr(logging, LogConfig.LOG_LEVEL, logging.WARNING)
    log_format = LogConfig.DEBUG_FORMAT if verbose else LogConfig.LOG_FORMAT

    logging.basicConfig(level=level, format=log_format, datefmt=LogConfig.DATE_FORMAT, stream=sys.stderr)
    root = logging.getLogger()
    root.setLevel(level)

    file_path = log_file or LogConfig.LOG_FILE
    if file_path:
        handler = RotatingFileHandler(
            file_path,
            maxBytes=LogConfig.LOG_FILE_MAX_BYTES,
            backupCount=LogConfig.LOG_FILE_BACKUP_COUNT
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(log_format, LogConfig.DATE_FORMAT))
        root.addHandler(handler)
        logger.info(f"Also logging to {file_path}")

    # Transport libraries are chatty at DEBUG
    for name in ("urllib3", "pysnmp"):
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug(f"Log level {logging.getLevelName(level)}")


def validate_config(snmp_settings: dict, redfish_credentials: Optional[dict] = None):
    """
    Reject unusable settings before any device is contacted.

    Raises:
        ConfigurationError: Listing every problem found
    """
    problems = []

    timeout = snmp_settings.get("timeout")
    if timeout is not None and int(timeout) <= 0:
        problems.append("SNMP timeout must be a positive number of seconds")

    port = snmp_settings.get("port")
    if port is not None and not 0 < int(port) < 65536:
        problems.append(f"SNMP port out of range: {port}")

    if redfish_credentials and redfish_credentials.get("host"):
        if not (redfish_credentials.get("username") and redfish_credentials.get("password")):
            problems.append("iLO Redfish host configured but missing username/password")

    if problems:
        raise ConfigurationError("Invalid configuration: " + "; ".join(problems))

    logger.debug("Configuration validated")


load_environment()

__all__ = [
    'AppConfig',
    'SnmpConfig',
    'RedfishConfig',
    'LogConfig',
    'load_environment',
    'setup_logging',
    'validate_config',
]
