"""
Exception hierarchy for the firmware check.

Local problems (a bad field, a missing optional column) never raise; they are
absorbed into degraded records. Only unusable input ends up here.
"""

from typing import Optional


class CheckError(Exception):
    """Base exception for all check errors."""


class ConfigurationError(CheckError, ValueError):
    """Raised when configuration is invalid, before any device data is read."""


class TransportError(CheckError):
    """Raised when samples cannot be retrieved from a device or capture."""


class NoDataError(CheckError):
    """Raised when a mandatory device table yields no rows."""

    def __init__(self, message: str, device_class: Optional[str] = None):
        super().__init__(message)
        self.device_class = device_class
