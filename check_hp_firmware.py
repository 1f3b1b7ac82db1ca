#!/usr/bin/env python3
"""
check_hp_firmware - Icinga / Nagios plugin for HPE firmware vulnerabilities

Checks HPE Smart Array controllers, SAS SSD drives and the iLO over SNMP for
firmware versions affected by known HPE advisories.

Usage:
    ./check_hp_firmware.py -H 192.0.2.10 -c public       # Query a host
    ./check_hp_firmware.py --snmpwalk-file walk.txt      # Check a recorded walk
    ./check_hp_firmware.py -H 192.0.2.10 --format json   # Output as JSON
    ./check_hp_firmware.py --ignore-ilo-version          # Skip the iLO check
"""

import sys

from hp_firmware.cli import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("[UNKNOWN] - Check cancelled by user")
        sys.exit(3)
