"""
Check status and device class enumerations.
"""

from enum import Enum


class Status(Enum):
    """
    Check status.

    The value is the monitoring plugin exit code.
    """
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    @property
    def label(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


class DeviceClass(Enum):
    """Device class tag, used to dispatch records to their rule set"""
    DRIVE = "drive"
    CONTROLLER = "controller"
    LOGICAL_DRIVE = "logical drive"
    ILO = "ilo"
