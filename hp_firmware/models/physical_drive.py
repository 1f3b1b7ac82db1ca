"""
Physical drive record - Value Object pattern.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from .status import DeviceClass


@dataclass(frozen=True)
class PhysicalDrive:
    """
    Immutable physical drive data read from cpqDaPhyDrvTable.

    Attributes:
        id: Row index of the drive ('<controller>.<drive>')
        model: Drive model (e.g. 'VO0480JFDGT')
        firmware: Firmware revision (e.g. 'HPD1')
        serial: Serial number
        status: Decoded drive status ('ok', 'failed', ...), None if not reported
        hours: Power-on reference hours, raw string when not numeric
        location: Location string reported by the controller
    """
    id: str
    model: str = ""
    firmware: str = ""
    serial: str = ""
    status: Optional[str] = None
    hours: Union[int, str, None] = None
    location: str = ""

    device_class: ClassVar[DeviceClass] = DeviceClass.DRIVE

    def describe(self) -> str:
        """Neutral description echoed in every result message"""
        hours = "" if self.hours is None else self.hours
        return (f"physical drive ({self.id}) model={self.model} serial={self.serial} "
                f"firmware={self.firmware} hours={hours}")
