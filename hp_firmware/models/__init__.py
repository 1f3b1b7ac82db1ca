"""
Data models and value objects.
Immutable records created fresh for every check run.
"""

from .status import Status, DeviceClass
from .snmp_sample import SnmpSample
from .physical_drive import PhysicalDrive
from .controller import Controller
from .logical_drive import LogicalDrive
from .ilo import Ilo

__all__ = [
    'Status',
    'DeviceClass',
    'SnmpSample',
    'PhysicalDrive',
    'Controller',
    'LogicalDrive',
    'Ilo',
]
