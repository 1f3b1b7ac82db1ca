"""
Rules for HPE SAS solid state drives.

HPE SAS Solid State Drives - Critical Firmware Upgrade Required for Certain
HPE SAS Solid State Drive Models to Prevent Drive Failure at 32,768 or 40,000
Hours of Operation.

* https://support.hpe.com/hpesc/public/docDisplay?docLocale=en_US&docId=emr_na-a00092491en_us
* https://support.hpe.com/hpesc/public/docDisplay?docLocale=en_US&docId=a00097382en_us
"""

from .base_rule import Rule, RuleSet
from .matchers import FirmwareAtLeastMatcher, ModelMatcher, StatusNotOkMatcher
from ..models import DeviceClass, Status

# Drives failing at 32,768 power-on hours, fixed in HPD8
AFFECTED_MODELS_32768 = frozenset([
    "VO0480JFDGT",
    "VO0960JFDGU",
    "VO1920JFDGV",
    "VO3840JFDHA",
    "MO0400JFFCF",
    "MO0800JFFCH",
    "MO1600JFFCK",
    "MO3200JFFCL",
    "VO000480JWDAR",
    "VO000960JWDAT",
    "VO001920JWDAU",
    "VO003840JWDAV",
    "VO007680JWCNK",
    "VO015300JWCNL",
    "VK000960JWSSQ",
    "VK001920JWSSR",
    "VK003840JWSST",
    "VK003840JWSSU",
    "VK007680JWSSV",
    "VK015300JWSSW",
    "MO000400JWDKU",
    "MO000800JWDKV",
    "MO001600JWDLA",
    "MO003200JWDLB",
    "MO006400JWDLC",
])
FIXED_FIRMWARE_32768 = "HPD8"

# Drives failing at 40,000 power-on hours, fixed in HPD7
AFFECTED_MODELS_40000 = frozenset([
    "EK0800JVYPN",
    "EO1600JVYPP",
    "MK0800JVYPQ",
    "MO1600JVYPR",
])
FIXED_FIRMWARE_40000 = "HPD7"

DRIVE_RULES = RuleSet(
    device_class=DeviceClass.DRIVE,
    rules=(
        Rule(
            name="drive-status",
            matchers=(StatusNotOkMatcher(),),
            status=Status.CRITICAL,
            message="status: {record.status}"
        ),
        Rule(
            name="ssd-32768-fixed",
            matchers=(ModelMatcher(AFFECTED_MODELS_32768), FirmwareAtLeastMatcher(FIXED_FIRMWARE_32768)),
            status=Status.OK,
            message="firmware update applied"
        ),
        Rule(
            name="ssd-32768-affected",
            matchers=(ModelMatcher(AFFECTED_MODELS_32768),),
            status=Status.CRITICAL,
            message=f"affected by FW bug, drive fails after 32768 hours - update to {FIXED_FIRMWARE_32768}!"
        ),
        Rule(
            name="ssd-40000-fixed",
            matchers=(ModelMatcher(AFFECTED_MODELS_40000), FirmwareAtLeastMatcher(FIXED_FIRMWARE_40000)),
            status=Status.OK,
            message="firmware update applied"
        ),
        Rule(
            name="ssd-40000-affected",
            matchers=(ModelMatcher(AFFECTED_MODELS_40000),),
            status=Status.CRITICAL,
            message=f"affected by FW bug, drive fails after 40000 hours - update to {FIXED_FIRMWARE_40000}!"
        ),
    )
)
