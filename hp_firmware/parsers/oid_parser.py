"""
OID parser for validating numeric OIDs and deriving table row indexes.

Examples:
- .1.3.6.1.4.1.232.3.2.5.1.1.3.0.1 is below .1.3.6.1.4.1.232.3.2.5.1.1.3
- its sub OID (the row index) is 0.1
"""


class OidParser:
    """
    Predicates over dotted numeric OID strings.

    An OID starts with a dot, has only digits between the dots and neither
    empty labels nor a trailing dot.
    """

    SEPARATOR = "."

    @classmethod
    def is_oid(cls, oid: str) -> bool:
        """
        Check if a string is a valid numeric OID.

        Args:
            oid: String to check

        Returns:
            True if oid is valid

        Examples:
            >>> OidParser.is_oid('.1.1')
            True
            >>> OidParser.is_oid('.1..1')
            False
        """
        if not oid or len(oid) < 2 or not oid.startswith(cls.SEPARATOR):
            return False

        last_char = oid[0]
        for char in oid[1:]:
            if char == cls.SEPARATOR:
                if last_char == cls.SEPARATOR:
                    return False
            elif not ("0" <= char <= "9"):
                return False
            last_char = char

        return last_char != cls.SEPARATOR

    @classmethod
    def is_oid_part_of(cls, oid: str, base_oid: str) -> bool:
        """
        Check if an OID equals or lies below another OID.

        Matches on label boundaries: '.1.10' is not part of '.1.1'.

        Args:
            oid: OID to test
            base_oid: Parent OID

        Returns:
            True if oid equals base_oid or starts with base_oid followed by a dot
        """
        if not cls.is_oid(oid) or not cls.is_oid(base_oid):
            return False

        if oid == base_oid:
            return True

        return oid.startswith(base_oid + cls.SEPARATOR)

    @classmethod
    def get_sub_oid(cls, oid: str, base_oid: str) -> str:
        """
        Get the part of an OID below a base OID.

        Args:
            oid: Full OID
            base_oid: Parent OID

        Returns:
            Suffix after 'base_oid.', or an empty string if oid is not strictly below base_oid

        Examples:
            >>> OidParser.get_sub_oid('.1.3.6.1.1.5.1.1', '.1.3.6.1.1.5')
            '1.1'
        """
        if oid == base_oid or not cls.is_oid_part_of(oid, base_oid):
            return ""

        return oid[len(base_oid) + 1:]
