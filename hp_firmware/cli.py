"""
Command line interface of the check plugin.

Exit codes follow the monitoring plugin convention:
0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN
"""

import argparse
import logging
from typing import List, Optional

from .config import (
    AppConfig,
    RedfishConfig,
    SnmpConfig,
    load_environment,
    setup_logging,
    validate_config,
)
from .exceptions import CheckError
from .formatters import NagiosFormatter
from .models import Status
from .services import initialize_check
from .strategies import SourceType

logger = logging.getLogger(__name__)

README = """
**HPE Controllers**

  HPE Smart Array SR Gen10 Controller Firmware Version 2.65 (or later) is required to prevent a
  potential data inconsistency on select RAID configurations with Smart Array Gen10 Firmware
  Version 1.98 through 2.62.

  CRITICAL when the firmware is in the affected range with RAID 1/10/ADM or RAID 5/6/50/60
  configured, WARNING when no affected RAID level is configured. A short note is added when the
  firmware is older than affected or has been updated.

**HPE SSD SAS disks**

  Critical Firmware Upgrade Required for Certain HPE SAS Solid State Drive Models to Prevent
  Drive Failure at 32,768 or 40,000 Hours of Operation.

  CRITICAL when the drive needs to be updated ("affected by FW bug"), OK with "firmware update
  applied" when the drive is patched.

**HPE Integrated Lights-Out**

  CRITICAL when the iLO firmware is older than the least fixed version:
   - iLO 3 firmware v1.93 or later
   - iLO 4 firmware v2.75 or later
   - iLO 5 firmware v2.18 or later

Please see support documents from HPE:
* https://support.hpe.com/hpesc/public/docDisplay?docLocale=en_US&docId=emr_na-a00092491en_us
* https://support.hpe.com/hpesc/public/docDisplay?docLocale=en_US&docId=a00097382en_us
* https://support.hpe.com/hpesc/public/docDisplay?docLocale=en_US&docId=a00097210en_us
* https://support.hpe.com/hpesc/public/docDisplay?docId=hpesbhf04012en_us

Examples:
  # Check a host over SNMP v2c
  check_hp_firmware -H 192.0.2.10 -c public

  # Check a recorded walk (snmpwalk -On -c public -v2c host .1.3.6.1.4.1.232)
  check_hp_firmware --snmpwalk-file host.txt

  # Read the iLO version over Redfish instead of SNMP
  check_hp_firmware -H 192.0.2.10 --redfish-host 192.0.2.11 --redfish-username admin
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=AppConfig.APP_NAME,
        description=AppConfig.APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=README
    )

    parser.add_argument(
        "--hostname", "-H",
        help=f"SNMP host (default: {SnmpConfig.DEFAULT_HOST}, or SNMP_HOST env var)"
    )

    parser.add_argument(
        "--community", "-c",
        help=f"SNMP community (default: {SnmpConfig.DEFAULT_COMMUNITY}, or SNMP_COMMUNITY env var)"
    )

    parser.add_argument(
        "--protocol", "-P",
        help=f"SNMP protocol: 1 or 2c (default: {SnmpConfig.DEFAULT_PROTOCOL})"
    )

    parser.add_argument(
        "--port",
        type=int,
        help=f"SNMP port (default: {SnmpConfig.DEFAULT_PORT})"
    )

    parser.add_argument(
        "--timeout",
        type=int,
        help=f"SNMP timeout in seconds (default: {SnmpConfig.DEFAULT_TIMEOUT})"
    )

    parser.add_argument(
        "--snmpwalk-file",
        help="Read output from snmpwalk instead of querying the host"
    )

    parser.add_argument(
        "--ignore-ilo-version",
        action="store_true",
        help="Don't check the iLO version"
    )

    # Kept for compatibility, the iLO is checked by default
    parser.add_argument(
        "--ilo", "-I",
        action="store_true",
        help=argparse.SUPPRESS
    )

    ip_group = parser.add_mutually_exclusive_group()
    ip_group.add_argument(
        "--ipv4", "-4",
        action="store_true",
        help="Use IPv4"
    )
    ip_group.add_argument(
        "--ipv6", "-6",
        action="store_true",
        help="Use IPv6"
    )

    parser.add_argument(
        "--redfish-host",
        help="Read the iLO version over Redfish from this host (or ILO_REDFISH_HOST env var)"
    )

    parser.add_argument(
        "--redfish-username",
        help="iLO Redfish username (or ILO_REDFISH_USERNAME env var)"
    )

    parser.add_argument(
        "--redfish-password",
        help="iLO Redfish password (or ILO_REDFISH_PASSWORD env var)"
    )

    parser.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        default="text",
        help="Output format: text (default) or json"
    )

    parser.add_argument(
        "--env-file", "-e",
        help="Path to .env file with settings"
    )

    parser.add_argument(
        "--log-file",
        help="Also write logs to this file"
    )

    parser.add_argument(
        "--version", "-V",
        action="store_true",
        help="Show version"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )

    return parser


def build_snmp_settings(args: argparse.Namespace) -> dict:
    """Merge command line arguments over the environment settings"""
    settings = SnmpConfig.get_settings()

    if args.hostname:
        settings["host"] = args.hostname
    if args.community:
        settings["community"] = args.community
    if args.protocol:
        settings["protocol"] = args.protocol
    if args.port:
        settings["port"] = args.port
    if args.timeout is not None:
        settings["timeout"] = args.timeout

    if args.ipv4:
        settings["ip_version"] = 4
    elif args.ipv6:
        settings["ip_version"] = 6

    return settings


def build_redfish_credentials(args: argparse.Namespace) -> dict:
    credentials = RedfishConfig.get_credentials()

    if args.redfish_host:
        credentials["host"] = args.redfish_host
    if args.redfish_username:
        credentials["username"] = args.redfish_username
    if args.redfish_password:
        credentials["password"] = args.redfish_password

    return credentials


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the check.

    Args:
        argv: Command line arguments, defaults to sys.argv[1:]

    Returns:
        Plugin exit code
    """
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except SystemExit:
        # --help and usage errors
        return Status.UNKNOWN.value

    if args.version:
        print(f"{AppConfig.APP_NAME} version {AppConfig.build_version()}")
        return Status.UNKNOWN.value

    setup_logging(verbose=args.debug, log_file=args.log_file)

    if args.env_file:
        load_environment(args.env_file)

    try:
        redfish_credentials = build_redfish_credentials(args)

        if args.snmpwalk_file:
            source_type = SourceType.FILE
            settings = {"path": args.snmpwalk_file}
        else:
            source_type = SourceType.SNMP
            settings = build_snmp_settings(args)
            validate_config(settings, redfish_credentials)

        check = initialize_check(
            source_type,
            settings,
            check_ilo=not args.ignore_ilo_version,
            redfish_credentials=redfish_credentials if redfish_credentials.get("host") else None,
            redfish_timeout=RedfishConfig.get_timeout()
        )

        with check:
            results = check.run()

        print(NagiosFormatter(output_format=args.format).format(results))
        return results.status.value

    except CheckError as e:
        logger.debug(f"Check failed: {e}", exc_info=True)
        print(f"[UNKNOWN] - {e}")
        return Status.UNKNOWN.value
    except Exception as e:
        if args.debug:
            raise
        print(f"[UNKNOWN] - Unexpected error: {e}")
        return Status.UNKNOWN.value
