"""
Firmware version parser.

Versions are compared by their numeric segments, each as an integer:
- 2.65 > 2.62, 2.6 == 2.6.0
- HPD8 > HPD1
"""

import re
from typing import Optional, Tuple


class VersionParser:
    """Numeric, segment-wise firmware version comparison"""

    SEGMENT_PATTERN = re.compile(r'\d+')

    @classmethod
    def parse(cls, version: Optional[str]) -> Tuple[int, ...]:
        """
        Split a version string into its numeric segments.

        Args:
            version: Version string (e.g. '2.65', 'HPD8', 'iLO 5 v2.72')

        Returns:
            Tuple of integers, empty if the string has no digits
        """
        if version is None:
            return ()
        return tuple(int(segment) for segment in cls.SEGMENT_PATTERN.findall(str(version)))

    @classmethod
    def is_valid(cls, version: Optional[str]) -> bool:
        """Check if a version string has at least one numeric segment"""
        return bool(cls.parse(version))

    @classmethod
    def compare(cls, left: Optional[str], right: Optional[str]) -> int:
        """
        Compare two versions.

        Missing trailing segments compare as 0.

        Returns:
            -1 if left < right, 0 if equal, 1 if left > right
        """
        left_parts = cls.parse(left)
        right_parts = cls.parse(right)
        length = max(len(left_parts), len(right_parts))
        left_parts += (0,) * (length - len(left_parts))
        right_parts += (0,) * (length - len(right_parts))

        if left_parts < right_parts:
            return -1
        if left_parts > right_parts:
            return 1
        return 0

    @classmethod
    def is_at_least(cls, version: Optional[str], minimum: str) -> bool:
        """Check if version >= minimum"""
        return cls.compare(version, minimum) >= 0

    @classmethod
    def is_below(cls, version: Optional[str], floor: str) -> bool:
        """Check if version < floor"""
        return cls.compare(version, floor) < 0

    @classmethod
    def is_in_range(cls, version: Optional[str], lower: str, upper: str) -> bool:
        """Check if lower <= version <= upper"""
        return cls.compare(version, lower) >= 0 and cls.compare(version, upper) <= 0
