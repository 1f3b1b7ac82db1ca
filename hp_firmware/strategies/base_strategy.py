"""
Base sample strategy - Abstract base class using Strategy Pattern.
Defines the interface every sample source must implement.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from ..models import SnmpSample

logger = logging.getLogger(__name__)


class SourceType(Enum):
    """Sample source enumeration"""
    SNMP = "SNMP"
    FILE = "FILE"


class SampleStrategy(ABC):
    """
    Abstract base class for sample sources.

    Design Pattern: Strategy Pattern
    A live SNMP walk and a recorded capture feed the same samples to the check.

    Responsibilities:
    - Validate source settings before any data is read
    - Open and close the underlying transport
    - Walk OID subtrees into SnmpSample lists
    """

    def __init__(self, settings: Dict[str, Any]):
        """
        Initialize strategy with settings.

        Args:
            settings: Dictionary of source-specific settings
        """
        self.settings = settings
        self._cache: Optional[List[SnmpSample]] = None

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return source name for logging"""
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """
        Check if strategy has all required settings.

        Returns:
            True if the source can be used
        """
        pass

    @abstractmethod
    def ensure_connected(self) -> None:
        """Open the transport if necessary"""
        pass

    @abstractmethod
    def walk(self, root_oid: str) -> List[SnmpSample]:
        """
        Walk one OID subtree.

        Args:
            root_oid: Subtree to walk

        Returns:
            All samples below root_oid, in source order

        Raises:
            TransportError: If the source fails or times out
        """
        pass

    def walk_all(self, root_oids: Iterable[str]) -> List[SnmpSample]:
        """
        Walk several subtrees and return all samples.

        The result is complete before it is returned.
        """
        samples: List[SnmpSample] = []
        for root_oid in root_oids:
            subtree = self.walk(root_oid)
            logger.debug(f"{self.source_name}: {len(subtree)} samples below {root_oid}")
            samples.extend(subtree)
        return samples

    @abstractmethod
    def disconnect(self) -> None:
        """Close the transport and cleanup resources"""
        pass

    def clear_cache(self):
        """Clear cached data"""
        self._cache = None

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self.disconnect()
