"""
Logical drive extractor.
"""

from typing import Dict, List, Optional, Tuple

from .base_extractor import TableExtractor
from ..models import DeviceClass, LogicalDrive
from ..tables import SnmpTable


class LogicalDriveExtractor(TableExtractor):
    """Maps cpqDaLogDrvTable rows to LogicalDrive records"""

    @property
    def device_class(self) -> DeviceClass:
        return DeviceClass.LOGICAL_DRIVE

    def extract_row(self, table: SnmpTable, index: str, row: Dict[str, str]) -> LogicalDrive:
        # Row index is '<controller>.<drive>', the column is authoritative when present
        controller_id = self._text(row, "controller_index") or index.split(".")[0]

        return LogicalDrive(
            id=index,
            controller_id=controller_id,
            raid_type=self._decode(table, row, "fault_tolerance") or "",
            status=self._decode(table, row, "status")
        )

    @staticmethod
    def raid_types_by_controller(logical_drives: List[LogicalDrive]) -> Dict[str, Tuple[str, ...]]:
        """
        Group RAID levels by controller.

        Args:
            logical_drives: Extracted logical drives

        Returns:
            Controller id to unique RAID levels in first-seen order
        """
        grouped: Dict[str, List[str]] = {}
        for drive in logical_drives:
            raid_types = grouped.setdefault(drive.controller_id, [])
            if drive.raid_type and drive.raid_type not in raid_types:
                raid_types.append(drive.raid_type)

        return {controller_id: tuple(types) for controller_id, types in grouped.items()}

    def extract_raid_types(self, table: SnmpTable) -> Optional[Dict[str, Tuple[str, ...]]]:
        """
        Extract the RAID configuration of all controllers.

        Returns:
            Controller id to RAID levels, None if the table is empty (configuration unknown)
        """
        if table.is_empty():
            return None
        return self.raid_types_by_controller(self.extract(table))
