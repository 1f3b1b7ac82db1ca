"""
Array controller extractor.
"""

from typing import Dict, Optional, Tuple

from .base_extractor import TableExtractor
from ..models import Controller, DeviceClass
from ..tables import SnmpTable


class ControllerExtractor(TableExtractor):
    """
    Maps cpqDaCntlrTable rows to Controller records.

    The RAID configuration comes from the logical drive table. Without it the
    controllers carry raid_types=None (unknown).
    """

    def __init__(self, raid_types: Optional[Dict[str, Tuple[str, ...]]] = None):
        """
        Initialize extractor.

        Args:
            raid_types: Controller id to configured RAID levels, None if unknown
        """
        self.raid_types = raid_types

    @property
    def device_class(self) -> DeviceClass:
        return DeviceClass.CONTROLLER

    def extract_row(self, table: SnmpTable, index: str, row: Dict[str, str]) -> Controller:
        raid_types = None
        if self.raid_types is not None:
            raid_types = self.raid_types.get(index, ())

        return Controller(
            id=index,
            model=self._decode(table, row, "model") or "",
            firmware=self._text(row, "firmware"),
            serial=self._text(row, "serial"),
            status=self._decode(table, row, "condition"),
            location=self._text(row, "location"),
            raid_types=raid_types
        )
