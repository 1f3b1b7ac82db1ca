"""
Logical drive record - Value Object pattern.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from .status import DeviceClass


@dataclass(frozen=True)
class LogicalDrive:
    """
    Immutable logical drive data read from cpqDaLogDrvTable.

    Only used to derive the RAID configuration of a controller.

    Attributes:
        id: Row index of the logical drive
        controller_id: Index of the owning controller
        raid_type: RAID level label ('1', '5', '10ADM', ...)
        status: Decoded logical drive status
    """
    id: str
    controller_id: str = ""
    raid_type: str = ""
    status: Optional[str] = None

    device_class: ClassVar[DeviceClass] = DeviceClass.LOGICAL_DRIVE
