"""
Parser utilities for OIDs, firmware versions and recorded snmpwalk output.
"""

from .oid_parser import OidParser
from .version_parser import VersionParser
from .snmpwalk_parser import SnmpWalkParser

__all__ = ['OidParser', 'VersionParser', 'SnmpWalkParser']
