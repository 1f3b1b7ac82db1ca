"""
HPE Firmware Check Package

Icinga / Nagios check for known firmware vulnerabilities of HPE Smart Array
controllers, SAS SSD drives and the Integrated Lights-Out (iLO).

Architecture:
- Strategy Pattern for sample sources (live SNMP walk, snmpwalk capture)
- Factory Pattern for creating sources
- Facade Pattern for the check service
- Value Object Pattern for device records
- Ordered rule sets per device class, first match wins
"""

from .exceptions import CheckError, ConfigurationError, TransportError, NoDataError
from .models import Status, DeviceClass, SnmpSample, PhysicalDrive, Controller, LogicalDrive, Ilo
from .parsers import OidParser, VersionParser, SnmpWalkParser
from .tables import SnmpTable, TableSchema, ColumnDefinition
from .extractors import DriveExtractor, ControllerExtractor, LogicalDriveExtractor, IloExtractor
from .rules import Rule, RuleSet, RuleEngine, EvaluationResult
from .strategies import SampleStrategy, SourceType, SnmpWalkStrategy, SnmpWalkFileStrategy, RedfishIloStrategy
from .repositories import StrategyFactory
from .services import Overall, CheckService, CheckResults, initialize_check
from .formatters import NagiosFormatter

__all__ = [
    # Errors
    "CheckError",
    "ConfigurationError",
    "TransportError",
    "NoDataError",
    # Models
    "Status",
    "DeviceClass",
    "SnmpSample",
    "PhysicalDrive",
    "Controller",
    "LogicalDrive",
    "Ilo",
    # Parsers
    "OidParser",
    "VersionParser",
    "SnmpWalkParser",
    # Tables
    "SnmpTable",
    "TableSchema",
    "ColumnDefinition",
    # Extractors
    "DriveExtractor",
    "ControllerExtractor",
    "LogicalDriveExtractor",
    "IloExtractor",
    # Rules
    "Rule",
    "RuleSet",
    "RuleEngine",
    "EvaluationResult",
    # Strategies
    "SampleStrategy",
    "SourceType",
    "SnmpWalkStrategy",
    "SnmpWalkFileStrategy",
    "RedfishIloStrategy",
    # Factory
    "StrategyFactory",
    # Services
    "Overall",
    "CheckService",
    "CheckResults",
    "initialize_check",
    # Formatters
    "NagiosFormatter",
]
