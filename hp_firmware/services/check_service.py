"""
Check Service - Main business logic for the firmware check.

Runs the pipeline in strict stages:
samples -> tables -> typed records -> rule results -> overall status
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .overall import Overall
from ..exceptions import NoDataError
from ..extractors import ControllerExtractor, DriveExtractor, IloExtractor, LogicalDriveExtractor
from ..models import Controller, Ilo, PhysicalDrive, SnmpSample, Status
from ..repositories import StrategyFactory
from ..rules import RuleEngine
from ..strategies import RedfishIloStrategy, SampleStrategy, SourceType
from ..tables import (
    CONTROLLER_SCHEMA,
    DRIVE_SCHEMA,
    ILO_SCHEMA,
    LOGICAL_DRIVE_SCHEMA,
    SnmpTable,
    TableSchema,
)

logger = logging.getLogger(__name__)


@dataclass
class ExtractedRecords:
    """
    Typed records of one run, plus the data-unavailable errors per device class.
    """
    controllers: List[Controller] = field(default_factory=list)
    drives: List[PhysicalDrive] = field(default_factory=list)
    ilo: Optional[Ilo] = None
    errors: List[NoDataError] = field(default_factory=list)


class CheckResults:
    """
    Encapsulates the outcome of one check run.
    """

    def __init__(self, overall: Overall, controller_count: int, drive_count: int):
        self.overall = overall
        self.controller_count = controller_count
        self.drive_count = drive_count
        self.overall.summary = self.build_summary()

    @property
    def status(self) -> Status:
        return self.overall.get_status()

    def build_summary(self) -> str:
        """Summary line for the overall status"""
        status = self.status

        if status == Status.OK:
            summary = f"All {self.controller_count} controllers and {self.drive_count} drives seem fine"
            if self.overall.unknowns:
                summary += f", {self.overall.unknowns} device types without data"
            return summary
        if status == Status.WARNING:
            return f"Found {self.overall.warnings} warnings"
        if status == Status.CRITICAL:
            return f"Found {self.overall.criticals} critical problems"
        return f"Found {self.overall.unknowns} device types without data"


class CheckService:
    """
    Main check service - orchestrates the check.

    Design Pattern: Facade Pattern
    Provides a simple interface to sources, table builder, extractors and rules.
    """

    def __init__(self,
                 strategy: SampleStrategy,
                 rule_engine: Optional[RuleEngine] = None,
                 check_ilo: bool = True,
                 ilo_strategy: Optional[RedfishIloStrategy] = None):
        """
        Initialize check service.

        Args:
            strategy: Sample source (live walk or capture file)
            rule_engine: Rule engine, defaults to the built-in rules
            check_ilo: If False, skip the iLO firmware check
            ilo_strategy: Optional Redfish client used for the iLO instead of SNMP
        """
        self._strategy = strategy
        self._rule_engine = rule_engine or RuleEngine.default()
        self._check_ilo = check_ilo
        self._ilo_strategy = ilo_strategy

    def _schemas(self) -> List[TableSchema]:
        schemas = [CONTROLLER_SCHEMA, LOGICAL_DRIVE_SCHEMA, DRIVE_SCHEMA]
        if self._check_ilo and not self._ilo_strategy:
            schemas.append(ILO_SCHEMA)
        return schemas

    def collect_samples(self) -> List[SnmpSample]:
        """
        Retrieve all samples from the source.

        Raises:
            TransportError: If the source fails
        """
        samples = self._strategy.walk_all(schema.oid for schema in self._schemas())
        logger.info(f"Collected {len(samples)} samples from {self._strategy.source_name}")
        return samples

    def build_tables(self, samples: List[SnmpSample]) -> Dict[str, SnmpTable]:
        """Build every table independently from the same samples"""
        return {
            schema.name: SnmpTable.from_samples(schema, samples)
            for schema in self._schemas()
        }

    def extract_records(self, tables: Dict[str, SnmpTable]) -> ExtractedRecords:
        """
        Extract typed records from the tables.

        A device class without data is recorded as an error and does not stop
        the other classes.

        Raises:
            NoDataError: If neither controller nor drive data is available
        """
        records = ExtractedRecords()

        raid_types = LogicalDriveExtractor().extract_raid_types(tables[LOGICAL_DRIVE_SCHEMA.name])
        if raid_types is None:
            logger.info("No logical drive data found, RAID configuration unknown")

        try:
            records.controllers = ControllerExtractor(raid_types).extract(tables[CONTROLLER_SCHEMA.name])
        except NoDataError as e:
            logger.warning(str(e))
            records.errors.append(e)

        try:
            records.drives = DriveExtractor().extract(tables[DRIVE_SCHEMA.name])
        except NoDataError as e:
            logger.warning(str(e))
            records.errors.append(e)

        if not records.controllers and not records.drives:
            raise NoDataError("No HP controller or drive data found!")

        if self._check_ilo:
            try:
                records.ilo = self._get_ilo(tables)
            except NoDataError as e:
                logger.warning(str(e))
                records.errors.append(e)

        return records

    def _get_ilo(self, tables: Dict[str, SnmpTable]) -> Ilo:
        if self._ilo_strategy:
            try:
                return self._ilo_strategy.get_ilo()
            finally:
                self._ilo_strategy.disconnect()

        return IloExtractor().extract_one(tables[ILO_SCHEMA.name])

    def evaluate(self, records: ExtractedRecords) -> CheckResults:
        """
        Evaluate all records and aggregate the results.

        Order: iLO, controllers, drives, then unavailable device classes.
        """
        ordered: List[Any] = []
        if records.ilo:
            ordered.append(records.ilo)
        ordered.extend(records.controllers)
        ordered.extend(records.drives)

        evaluated = self._rule_engine.evaluate_all(ordered)

        overall = Overall()
        for _, result in evaluated:
            overall.add(result.status, result.message)

        for error in records.errors:
            overall.add(Status.UNKNOWN, str(error))

        return CheckResults(
            overall=overall,
            controller_count=len(records.controllers),
            drive_count=len(records.drives)
        )

    def run(self) -> CheckResults:
        """
        Run the complete check.

        Returns:
            CheckResults with overall status and rendered output

        Raises:
            TransportError: If samples cannot be retrieved
            NoDataError: If no controller and no drive data was found
        """
        try:
            samples = self.collect_samples()
        finally:
            self._strategy.disconnect()

        tables = self.build_tables(samples)
        records = self.extract_records(tables)
        results = self.evaluate(records)

        logger.info(f"Check complete. Status: {results.status}")
        return results

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self._strategy.disconnect()
        if self._ilo_strategy:
            self._ilo_strategy.disconnect()


def initialize_check(source_type: SourceType,
                     settings: Dict[str, Any],
                     check_ilo: bool = True,
                     redfish_credentials: Optional[Dict[str, str]] = None,
                     redfish_timeout: int = 30) -> CheckService:
    """
    Initialize the check from source settings.

    Args:
        source_type: SNMP walk or capture file
        settings: Source settings
        check_ilo: If False, skip the iLO firmware check
        redfish_credentials: Optional iLO Redfish credentials
        redfish_timeout: Redfish request timeout in seconds

    Returns:
        Configured CheckService instance

    Raises:
        ConfigurationError: If the settings are invalid
    """
    strategy = StrategyFactory.create_strategy(source_type, settings)

    ilo_strategy = None
    if check_ilo and redfish_credentials:
        ilo_strategy = RedfishIloStrategy(redfish_credentials, timeout=redfish_timeout)
        if not ilo_strategy.is_configured():
            logger.warning("iLO Redfish not fully configured, reading iLO data over SNMP")
            ilo_strategy = None

    return CheckService(strategy=strategy, check_ilo=check_ilo, ilo_strategy=ilo_strategy)
