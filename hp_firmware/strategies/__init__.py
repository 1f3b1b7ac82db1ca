"""
Sample source implementations - Strategy Pattern.
A live SNMP walk and a recorded snmpwalk capture feed the same check.
"""

from .base_strategy import SampleStrategy, SourceType
from .snmp_strategy import SnmpWalkStrategy
from .file_strategy import SnmpWalkFileStrategy
from .redfish_strategy import RedfishIloStrategy

__all__ = [
    'SampleStrategy',
    'SourceType',
    'SnmpWalkStrategy',
    'SnmpWalkFileStrategy',
    'RedfishIloStrategy',
]
