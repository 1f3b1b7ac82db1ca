"""
Parser for recorded snmpwalk output.

Expects numeric OIDs (snmpwalk -On), one sample per line:
    .1.3.6.1.4.1.232.3.2.5.1.1.3.0.1 = STRING: "VO0480JFDGT"
    .1.3.6.1.4.1.232.3.2.5.1.1.6.0.1 = INTEGER: 2
    .1.3.6.1.2.1.1.3.0 = Timeticks: (4290) 0:00:42.90
    .1.3.6.1.4.1.232.3.2.5.1.1.64.0.1 = ""

Lines that do not start with an OID continue the value of the previous line.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from ..models import SnmpSample
from .oid_parser import OidParser

logger = logging.getLogger(__name__)


class SnmpWalkParser:
    """
    Parser turning snmpwalk text into SnmpSample objects.

    Handles:
    - quoted STRING values with escaped quotes
    - multi-line STRING values
    - enum renderings like 'ok(2)'
    - Timeticks renderings like '(4290) 0:00:42.90'
    - 'iso.' prefixed OIDs when snmpwalk printed them without MIBs
    """

    # <oid> = [<TYPE>: ]<value>
    LINE_PATTERN = re.compile(r'^((?:\.|iso\.)[0-9.]*)\s*=\s*(.*)$')
    TYPE_PATTERN = re.compile(r'^([A-Za-z][A-Za-z0-9\- ]*?):\s?(.*)$', re.DOTALL)

    ENUM_PATTERN = re.compile(r'^[A-Za-z][\w\-]*\((-?\d+)\)$')
    TIMETICKS_PATTERN = re.compile(r'^\((\d+)\)')

    # Values reported instead of data
    MISSING_VALUES = (
        "No Such Object",
        "No Such Instance",
        "No more variables",
    )

    @classmethod
    def parse_file(cls, path: Path) -> List[SnmpSample]:
        """
        Parse a capture file.

        Args:
            path: Path to the capture file

        Returns:
            List of samples in file order
        """
        with open(path, "r", encoding="utf-8", errors="replace") as handle:
            return list(cls.parse_lines(handle))

    @classmethod
    def parse_text(cls, text: str) -> List[SnmpSample]:
        """Parse capture text held in memory"""
        return list(cls.parse_lines(text.splitlines()))

    @classmethod
    def parse_lines(cls, lines: Iterable[str]) -> Iterator[SnmpSample]:
        """
        Parse capture lines lazily.

        Args:
            lines: Iterable of text lines (file handle, list of strings)

        Yields:
            SnmpSample for every parseable line
        """
        pending: Optional[Tuple[str, str]] = None

        for line_number, line in enumerate(lines, start=1):
            line = line.rstrip("\r\n")
            match = cls.LINE_PATTERN.match(line)

            if match:
                if pending:
                    sample = cls._to_sample(*pending)
                    if sample:
                        yield sample
                pending = (match.group(1), match.group(2))
            elif pending:
                # Continuation of a multi-line value
                pending = (pending[0], f"{pending[1]}\n{line}")
            elif line.strip():
                logger.debug(f"Skipping unparseable line {line_number}: {line!r}")

        if pending:
            sample = cls._to_sample(*pending)
            if sample:
                yield sample

    @classmethod
    def _to_sample(cls, oid: str, raw: str) -> Optional[SnmpSample]:
        """Build a sample from an OID and its raw value text"""
        if oid.startswith("iso."):
            oid = ".1." + oid[4:]

        if not OidParser.is_oid(oid):
            logger.debug(f"Skipping invalid OID: {oid}")
            return None

        raw = raw.strip()
        if raw.startswith(cls.MISSING_VALUES):
            return None

        if raw == '""':
            return SnmpSample(oid=oid, value="", type="STRING")

        match = cls.TYPE_PATTERN.match(raw)
        if not match:
            return SnmpSample(oid=oid, value=cls._unquote(raw), type="STRING")

        value_type = match.group(1).strip()
        value = cls._convert(value_type, match.group(2).strip())
        return SnmpSample(oid=oid, value=value, type=value_type)

    @classmethod
    def _convert(cls, value_type: str, value: str) -> str:
        """Normalize a typed value to its plain string form"""
        upper = value_type.upper()

        if upper == "STRING":
            return cls._unquote(value)

        if upper == "INTEGER":
            match = cls.ENUM_PATTERN.match(value)
            if match:
                return match.group(1)
            return value

        if upper == "TIMETICKS":
            match = cls.TIMETICKS_PATTERN.match(value)
            if match:
                return match.group(1)
            return value

        return value

    @staticmethod
    def _unquote(value: str) -> str:
        """Strip surrounding quotes and unescape embedded ones"""
        if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
            value = value[1:-1]
            value = value.replace('\\"', '"').replace('\\\\', '\\')
        return value
