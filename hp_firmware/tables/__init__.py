"""
Device tables rebuilt from SNMP samples.
"""

from .snmp_table import ColumnDefinition, TableSchema, SnmpTable
from .schemas import (
    CONTROLLER_SCHEMA,
    LOGICAL_DRIVE_SCHEMA,
    DRIVE_SCHEMA,
    ILO_SCHEMA,
)

__all__ = [
    'ColumnDefinition',
    'TableSchema',
    'SnmpTable',
    'CONTROLLER_SCHEMA',
    'LOGICAL_DRIVE_SCHEMA',
    'DRIVE_SCHEMA',
    'ILO_SCHEMA',
]
