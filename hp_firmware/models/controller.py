"""
Array controller record - Value Object pattern.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from .status import DeviceClass


@dataclass(frozen=True)
class Controller:
    """
    Immutable array controller data read from cpqDaCntlrTable.

    Attributes:
        id: Row index of the controller
        model: Decoded controller model (e.g. 'p408i-a')
        firmware: Firmware version (e.g. '2.62')
        serial: Serial number
        status: Decoded controller condition, None if not reported
        location: Hardware location (e.g. 'Slot 0')
        raid_types: RAID levels of the logical drives on this controller.
            None when the logical drive configuration is unknown.
    """
    id: str
    model: str = ""
    firmware: str = ""
    serial: str = ""
    status: Optional[str] = None
    location: str = ""
    raid_types: Optional[Tuple[str, ...]] = None

    device_class: ClassVar[DeviceClass] = DeviceClass.CONTROLLER

    def describe(self) -> str:
        """Neutral description echoed in every result message"""
        return (f"controller ({self.id}) model={self.model} serial={self.serial} "
                f"firmware={self.firmware}")
