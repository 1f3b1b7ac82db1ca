"""
Rules for HPE Integrated Lights-Out firmware.

Multiple security vulnerabilities have been identified in iLO 3, iLO 4 and
iLO 5 firmware. Least fixed version of each product line:
- iLO 3 firmware v1.93 or later
- iLO 4 firmware v2.75 or later
- iLO 5 firmware v2.18 or later

* https://support.hpe.com/hpesc/public/docDisplay?docId=hpesbhf04012en_us
"""

from .base_rule import Rule, RuleSet
from .matchers import FirmwareBelowMatcher, FirmwareInvalidMatcher, ModelMatcher
from ..models import DeviceClass, Status

FIXED_VERSIONS = {
    "ilo3": "1.93",
    "ilo4": "2.75",
    "ilo5": "2.18",
}

_known = ModelMatcher(frozenset(FIXED_VERSIONS))


def _floor_rule(model: str, version: str) -> Rule:
    return Rule(
        name=f"{model}-floor",
        matchers=(ModelMatcher(frozenset([model])), FirmwareBelowMatcher(version)),
        status=Status.CRITICAL,
        message=f"version too old, should be at least {version}"
    )


ILO_RULES = RuleSet(
    device_class=DeviceClass.ILO,
    rules=(
        Rule(
            name="ilo-firmware-unknown",
            matchers=(_known, FirmwareInvalidMatcher()),
            status=Status.WARNING,
            message="firmware version could not be determined"
        ),
        *(_floor_rule(model, version) for model, version in FIXED_VERSIONS.items()),
        Rule(
            name="ilo-newer",
            matchers=(_known,),
            status=Status.OK,
            message="version newer than affected"
        ),
    ),
    default_message="no known vulnerable firmware for this model"
)
