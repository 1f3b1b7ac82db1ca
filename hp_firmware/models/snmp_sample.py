"""
SNMP sample data model - Value Object pattern.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SnmpSample:
    """
    One (OID, value) pair as returned by a walk or read from a capture.

    Attributes:
        oid: Numeric OID with a leading dot (e.g. '.1.3.6.1.2.1.1.5.0')
        value: Raw value, untyped until an extractor interprets it
        type: SNMP type name as reported by the source (e.g. 'STRING', 'INTEGER')
    """
    oid: str
    value: str
    type: str = "STRING"
