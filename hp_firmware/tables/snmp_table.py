"""
SNMP table builder.

Groups a flat stream of samples into per-device rows:
    {row index -> {column name -> raw value}}

The row index is the OID suffix after a column's base OID. It stays an
opaque string and rows correlate only on exact string equality.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..models import SnmpSample
from ..parsers import OidParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnDefinition:
    """
    One logical attribute of a device table.

    Attributes:
        name: Column name used by extractors (e.g. 'model')
        oid: Base OID of the column
        values: Optional enum map from raw value to a readable name
    """
    name: str
    oid: str
    values: Mapping[str, str] = field(default_factory=dict)

    def decode(self, value: Optional[str]) -> Optional[str]:
        """Decode an enum value, unknown values are returned unchanged"""
        if value is None:
            return None
        return self.values.get(value.strip(), value)


@dataclass(frozen=True)
class TableSchema:
    """
    Fixed set of columns making up a device table.

    Attributes:
        name: Table name (e.g. 'cpqDaPhyDrvTable')
        oid: Table entry OID, the subtree to walk
        columns: Column definitions
    """
    name: str
    oid: str
    columns: Tuple[ColumnDefinition, ...]

    def column(self, name: str) -> ColumnDefinition:
        for column in self.columns:
            if column.name == name:
                return column
        raise KeyError(f"Unknown column '{name}' in {self.name}")


class SnmpTable:
    """
    Table of device rows built from SNMP samples.

    Rows keep the order in which their index was first seen. Duplicate
    samples overwrite earlier ones; samples outside the schema are ignored.
    """

    def __init__(self, schema: TableSchema):
        """
        Initialize an empty table.

        Args:
            schema: Columns of this table
        """
        self.schema = schema
        self._rows: Dict[str, Dict[str, str]] = {}

    def add_sample(self, sample: SnmpSample) -> bool:
        """
        Add one sample to the table.

        Args:
            sample: Sample to add

        Returns:
            True if the sample belongs to a column of this table
        """
        if not OidParser.is_oid(sample.oid):
            logger.debug(f"Ignoring malformed OID: {sample.oid!r}")
            return False

        for column in self.schema.columns:
            index = OidParser.get_sub_oid(sample.oid, column.oid)
            if not index:
                continue

            row = self._rows.setdefault(index, {})
            if column.name in row:
                logger.debug(f"Duplicate value for {self.schema.name}[{index}].{column.name}, keeping last")
            row[column.name] = sample.value
            return True

        return False

    def load(self, samples: Iterable[SnmpSample]) -> 'SnmpTable':
        """
        Drain a sample sequence into the table.

        Args:
            samples: Samples in any order

        Returns:
            The table itself
        """
        count = 0
        for sample in samples:
            if self.add_sample(sample):
                count += 1

        logger.debug(f"{self.schema.name}: {count} samples in {len(self._rows)} rows")
        return self

    @classmethod
    def from_samples(cls, schema: TableSchema, samples: Iterable[SnmpSample]) -> 'SnmpTable':
        """Create a table and load samples into it"""
        return cls(schema).load(samples)

    def is_empty(self) -> bool:
        return not self._rows

    def indexes(self) -> List[str]:
        """Row indexes in first-seen order"""
        return list(self._rows.keys())

    def get_row(self, index: str) -> Dict[str, str]:
        """Get a copy of one row, empty if the index is unknown"""
        return dict(self._rows.get(index, {}))

    def rows(self) -> Iterator[Tuple[str, Dict[str, str]]]:
        """Iterate (index, row) pairs in first-seen order"""
        for index, row in self._rows.items():
            yield index, dict(row)

    def __len__(self) -> int:
        return len(self._rows)
