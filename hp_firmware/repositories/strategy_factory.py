"""
Sample source factory.

Maps a SourceType to the strategy class that reads it and refuses to hand out
a source whose settings are incomplete.
"""

import logging
from typing import Any, Dict, List, Type

from ..exceptions import ConfigurationError
from ..strategies import SampleStrategy, SourceType, SnmpWalkStrategy, SnmpWalkFileStrategy

logger = logging.getLogger(__name__)


class StrategyFactory:
    """
    Design Pattern: Factory Pattern + Registry Pattern

    A live walk and a capture file are the two registered sources.
    """

    _STRATEGIES: Dict[SourceType, Type[SampleStrategy]] = {
        SourceType.SNMP: SnmpWalkStrategy,
        SourceType.FILE: SnmpWalkFileStrategy,
    }

    @classmethod
    def get_supported_sources(cls) -> List[SourceType]:
        return list(cls._STRATEGIES)

    @classmethod
    def create_strategy(cls, source_type: SourceType, settings: Dict[str, Any]) -> SampleStrategy:
        """
        Build the sample source for a run.

        Args:
            source_type: SNMP walk or capture file
            settings: Host / community / protocol, or the capture path

        Returns:
            Configured strategy, nothing has been read yet

        Raises:
            ConfigurationError: For an unsupported source, a rejected protocol
                selector or incomplete settings
        """
        strategy_class = cls._STRATEGIES.get(source_type)
        if strategy_class is None:
            supported = ", ".join(source.value for source in cls.get_supported_sources())
            raise ConfigurationError(f"Unsupported source {source_type}, expected one of: {supported}")

        strategy = strategy_class(settings)
        if not strategy.is_configured():
            raise ConfigurationError(f"Source {source_type.value} is not configured")

        logger.debug(f"Using {strategy.source_name}")
        return strategy
