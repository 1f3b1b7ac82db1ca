"""
Rule matchers - predicates over typed device records.

A rule matches a record when all of its matchers match.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import FrozenSet, Optional

from ..parsers import VersionParser


class Matcher(ABC):
    """Abstract predicate over a record"""

    @abstractmethod
    def matches(self, record) -> bool:
        pass


@dataclass(frozen=True)
class StatusNotOkMatcher(Matcher):
    """
    Device reports an explicit failure status.

    'other' is the MIB's value for a condition the agent cannot determine and
    counts as no verdict, like a missing status.
    """
    NO_VERDICT = frozenset(["ok", "other"])

    def matches(self, record) -> bool:
        return record.status is not None and record.status not in self.NO_VERDICT


@dataclass(frozen=True)
class ModelMatcher(Matcher):
    """Exact, case-sensitive model membership"""
    models: FrozenSet[str]

    def matches(self, record) -> bool:
        return record.model in self.models


@dataclass(frozen=True)
class FirmwareInvalidMatcher(Matcher):
    """Firmware has no numeric segment to compare"""

    def matches(self, record) -> bool:
        return not VersionParser.is_valid(record.firmware)


@dataclass(frozen=True)
class FirmwareAtLeastMatcher(Matcher):
    """Firmware is at or above a version (e.g. the fixed version)"""
    version: str

    def matches(self, record) -> bool:
        return VersionParser.is_at_least(record.firmware, self.version)


@dataclass(frozen=True)
class FirmwareBelowMatcher(Matcher):
    """Firmware is strictly below a floor version"""
    version: str

    def matches(self, record) -> bool:
        return VersionParser.is_below(record.firmware, self.version)


@dataclass(frozen=True)
class FirmwareRangeMatcher(Matcher):
    """Firmware is within an inclusive [lower, upper] range"""
    lower: str
    upper: str

    def matches(self, record) -> bool:
        return VersionParser.is_in_range(record.firmware, self.lower, self.upper)


@dataclass(frozen=True)
class RaidTypeMatcher(Matcher):
    """Controller has at least one of the RAID levels configured"""
    raid_types: FrozenSet[str]

    def matches(self, record) -> bool:
        configured: Optional[tuple] = record.raid_types
        if not configured:
            return False
        return any(raid_type in self.raid_types for raid_type in configured)


@dataclass(frozen=True)
class RaidUnknownMatcher(Matcher):
    """Controller RAID configuration could not be read"""

    def matches(self, record) -> bool:
        return record.raid_types is None
