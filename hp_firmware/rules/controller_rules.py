"""
Rules for HPE Smart Array SR Gen10 controllers.

HPE Smart Array SR Gen10 Controller Firmware Version 2.65 (or later) is
required to prevent a potential data inconsistency on select RAID
configurations with Smart Array Gen10 Firmware Version 1.98 through 2.62.

* https://support.hpe.com/hpesc/public/docDisplay?docLocale=en_US&docId=a00097210en_us
"""

from .base_rule import Rule, RuleSet
from .matchers import (
    FirmwareAtLeastMatcher,
    FirmwareBelowMatcher,
    FirmwareInvalidMatcher,
    FirmwareRangeMatcher,
    ModelMatcher,
    RaidTypeMatcher,
    RaidUnknownMatcher,
    StatusNotOkMatcher,
)
from ..models import DeviceClass, Status

AFFECTED_MODELS = frozenset([
    "e208i-p",
    "e208i-a",
    "e208i-c",
    "e208e-p",
    "p204i-b",
    "p204i-c",
    "p408i-p",
    "p408i-a",
    "p408e-p",
    "p408i-c",
    "p408e-m",
    "p416ie-m",
    "p816i-a",
])

VERSION_AFFECTED_START = "1.98"
VERSION_AFFECTED_END = "2.62"
VERSION_FIXED = "2.65"

RAID_MIRRORED = frozenset(["1", "10", "1ADM", "10ADM"])
RAID_PARITY = frozenset(["5", "6", "50", "60"])

MESSAGE_MIRRORED = "if you have RAID 1/10/ADM - update immediately!"
MESSAGE_PARITY = "if you have RAID 5/6/50/60 - update immediately!"

_affected = ModelMatcher(AFFECTED_MODELS)
_in_range = FirmwareRangeMatcher(VERSION_AFFECTED_START, VERSION_AFFECTED_END)

CONTROLLER_RULES = RuleSet(
    device_class=DeviceClass.CONTROLLER,
    rules=(
        Rule(
            name="controller-status",
            matchers=(StatusNotOkMatcher(),),
            status=Status.CRITICAL,
            message="status: {record.status}"
        ),
        Rule(
            name="controller-firmware-unknown",
            matchers=(_affected, FirmwareInvalidMatcher()),
            status=Status.WARNING,
            message="affected model, firmware version could not be determined"
        ),
        Rule(
            name="controller-fixed",
            matchers=(_affected, FirmwareAtLeastMatcher(VERSION_FIXED)),
            status=Status.OK,
            message="firmware has been updated"
        ),
        Rule(
            name="controller-older-than-affected",
            matchers=(_affected, FirmwareBelowMatcher(VERSION_AFFECTED_START)),
            status=Status.OK,
            message="firmware older than affected"
        ),
        Rule(
            name="controller-affected-mirrored",
            matchers=(_affected, _in_range, RaidTypeMatcher(RAID_MIRRORED)),
            status=Status.CRITICAL,
            message=f"in affected version range! {MESSAGE_MIRRORED}"
        ),
        Rule(
            name="controller-affected-parity",
            matchers=(_affected, _in_range, RaidTypeMatcher(RAID_PARITY)),
            status=Status.CRITICAL,
            message=f"in affected version range! {MESSAGE_PARITY}"
        ),
        Rule(
            name="controller-affected-raid-unknown",
            matchers=(_affected, _in_range, RaidUnknownMatcher()),
            status=Status.CRITICAL,
            message=f"in affected version range! {MESSAGE_MIRRORED} {MESSAGE_PARITY}"
        ),
        Rule(
            name="controller-affected-no-raid",
            matchers=(_affected, _in_range),
            status=Status.WARNING,
            message=f"in affected version range, no affected RAID configured - update to {VERSION_FIXED} recommended"
        ),
    )
)
