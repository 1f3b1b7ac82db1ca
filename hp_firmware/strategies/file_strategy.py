"""
Recorded snmpwalk capture as sample source.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

from .base_strategy import SampleStrategy
from ..exceptions import TransportError
from ..models import SnmpSample
from ..parsers import OidParser, SnmpWalkParser

logger = logging.getLogger(__name__)


class SnmpWalkFileStrategy(SampleStrategy):
    """Reads samples from the output of 'snmpwalk -On'"""

    def __init__(self, settings: Dict[str, Any]):
        super().__init__(settings)
        self.path = Path(settings["path"]) if settings.get("path") else None

    @property
    def source_name(self) -> str:
        return f"snmpwalk file {self.path}"

    def is_configured(self) -> bool:
        """Check if a capture file is set"""
        return self.path is not None

    def ensure_connected(self) -> None:
        """Parse the capture file once"""
        if self._cache is not None:
            return

        if not self.is_configured():
            raise TransportError("No snmpwalk file configured")

        logger.info(f"Reading snmpwalk output from {self.path}...")
        try:
            self._cache = SnmpWalkParser.parse_file(self.path)
        except OSError as e:
            raise TransportError(f"Could not read snmpwalk file {self.path}: {e}") from e

        logger.info(f"Loaded {len(self._cache)} samples from {self.path}")

    def walk(self, root_oid: str) -> List[SnmpSample]:
        """Return the cached samples below root_oid"""
        self.ensure_connected()
        return [sample for sample in self._cache if OidParser.is_oid_part_of(sample.oid, root_oid)]

    def disconnect(self) -> None:
        """Nothing to close for a file"""
        pass
