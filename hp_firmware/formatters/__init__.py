"""
Output formatters - Strategy Pattern for different output formats.
"""

from .base_formatter import OutputFormatter
from .nagios_formatter import NagiosFormatter

__all__ = ['OutputFormatter', 'NagiosFormatter']
