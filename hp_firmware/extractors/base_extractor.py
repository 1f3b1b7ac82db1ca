"""
Base extractor - Abstract base class mapping table rows to typed records.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Union

from ..exceptions import NoDataError
from ..models import DeviceClass
from ..tables import SnmpTable

logger = logging.getLogger(__name__)


class TableExtractor(ABC):
    """
    Abstract base class for entity extractors.

    Design Pattern: Template Method
    extract() walks the rows in table order, subclasses build one record per row.

    Missing columns fall back to defaults and unparseable numbers keep their
    raw string, so a bad field never drops a record.
    """

    @property
    @abstractmethod
    def device_class(self) -> DeviceClass:
        """Device class of the extracted records"""
        pass

    @property
    def no_data_message(self) -> str:
        return f"No HP {self.device_class.value} data found!"

    @abstractmethod
    def extract_row(self, table: SnmpTable, index: str, row: Dict[str, str]):
        """
        Build one record from a table row.

        Args:
            table: Source table, for enum decoding
            index: Row index
            row: Column name to raw value

        Returns:
            Typed record
        """
        pass

    def extract(self, table: SnmpTable) -> List:
        """
        Extract all records from a table.

        Args:
            table: Table built from samples

        Returns:
            One record per row, in first-seen row order

        Raises:
            NoDataError: If the table has no rows
        """
        if table.is_empty():
            raise NoDataError(self.no_data_message, device_class=self.device_class.value)

        records = [self.extract_row(table, index, row) for index, row in table.rows()]
        logger.debug(f"Extracted {len(records)} {self.device_class.value} records")
        return records

    @staticmethod
    def _text(row: Dict[str, str], column: str, default: str = "") -> str:
        """Get a stripped text value, default when missing"""
        value = row.get(column)
        if value is None:
            return default
        return value.strip()

    @staticmethod
    def _decode(table: SnmpTable, row: Dict[str, str], column: str) -> Optional[str]:
        """Get an enum value decoded through the column definition"""
        value = row.get(column)
        if value is None:
            return None
        return table.schema.column(column).decode(value.strip())

    @staticmethod
    def _number(row: Dict[str, str], column: str) -> Union[int, str, None]:
        """
        Parse a numeric value tolerantly.

        Returns:
            int when parseable, the raw string when not, None when missing
        """
        value = row.get(column)
        if value is None:
            return None

        try:
            return int(value.strip())
        except ValueError:
            logger.debug(f"Non-numeric value for {column}: {value!r}")
            return value
