"""
Entity extractors - map generic table rows to typed device records.
"""

from .base_extractor import TableExtractor
from .drive_extractor import DriveExtractor
from .logical_drive_extractor import LogicalDriveExtractor
from .controller_extractor import ControllerExtractor
from .ilo_extractor import IloExtractor

__all__ = [
    'TableExtractor',
    'DriveExtractor',
    'LogicalDriveExtractor',
    'ControllerExtractor',
    'IloExtractor',
]
