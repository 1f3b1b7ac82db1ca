"""
Physical drive extractor.
"""

from typing import Dict

from .base_extractor import TableExtractor
from ..models import DeviceClass, PhysicalDrive
from ..tables import SnmpTable


class DriveExtractor(TableExtractor):
    """Maps cpqDaPhyDrvTable rows to PhysicalDrive records"""

    @property
    def device_class(self) -> DeviceClass:
        return DeviceClass.DRIVE

    def extract_row(self, table: SnmpTable, index: str, row: Dict[str, str]) -> PhysicalDrive:
        return PhysicalDrive(
            id=index,
            model=self._text(row, "model"),
            firmware=self._text(row, "firmware"),
            serial=self._text(row, "serial"),
            status=self._decode(table, row, "status"),
            hours=self._number(row, "hours"),
            location=self._text(row, "location")
        )
