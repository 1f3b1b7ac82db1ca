"""
Live SNMP walk as sample source, using pysnmp.
"""

import asyncio
import logging
from typing import Any, Dict, Iterable, List

from pysnmp.error import PySnmpError
from pysnmp.hlapi.v3arch.asyncio import (
    CommunityData,
    ContextData,
    ObjectIdentity,
    ObjectType,
    SnmpEngine,
    Udp6TransportTarget,
    UdpTransportTarget,
    walk_cmd,
)

from .base_strategy import SampleStrategy
from ..exceptions import ConfigurationError, TransportError
from ..models import SnmpSample

logger = logging.getLogger(__name__)


class SnmpWalkStrategy(SampleStrategy):
    """
    Walks the HPE MIB subtrees of a host over SNMP v1 or v2c.

    Settings:
        host, port, community, protocol ('1', '2', '2c'), timeout (seconds),
        retries, ip_version (4, 6 or None for auto)
    """

    # Protocol selector -> pysnmp message processing model
    PROTOCOL_VERSIONS = {
        "1": 0,
        "2": 1,
        "2c": 1,
    }

    def __init__(self, settings: Dict[str, Any]):
        super().__init__(settings)
        self.host = settings.get("host")
        self.port = int(settings.get("port") or 161)
        self.community = settings.get("community") or "public"
        self.timeout = int(settings.get("timeout") or 15)
        self.retries = int(settings.get("retries", 1))
        self.ip_version = settings.get("ip_version")
        self.mp_model = self.mp_model_from_version(str(settings.get("protocol") or "2c"))
        self._connected = False

    @classmethod
    def mp_model_from_version(cls, version: str) -> int:
        """
        Map a protocol selector to the pysnmp message processing model.

        Args:
            version: '1', '2', '2c' or '3'

        Returns:
            0 for SNMPv1, 1 for SNMPv2c

        Raises:
            ConfigurationError: For SNMPv3 or an unknown selector
        """
        version = version.strip().lower()
        if version == "3":
            raise ConfigurationError("SNMPv3 is not supported")
        if version not in cls.PROTOCOL_VERSIONS:
            raise ConfigurationError(f"unknown SNMP version: {version}")
        return cls.PROTOCOL_VERSIONS[version]

    @property
    def source_name(self) -> str:
        return f"SNMP {self.host}:{self.port}"

    def is_configured(self) -> bool:
        """Check if host and community are set"""
        return all([self.host, self.community])

    def ensure_connected(self) -> None:
        """Validate the target, the engine lives for one walk_all() run"""
        if self._connected:
            return

        if not self.is_configured():
            raise TransportError("SNMP host is not configured")

        logger.info(f"Connecting to {self.source_name} (mpModel={self.mp_model})...")
        self._connected = True

    def walk(self, root_oid: str) -> List[SnmpSample]:
        return self.walk_all([root_oid])

    def walk_all(self, root_oids: Iterable[str]) -> List[SnmpSample]:
        """Walk all subtrees in one event loop run"""
        self.ensure_connected()
        try:
            return asyncio.run(self._walk_all(list(root_oids)))
        except (PySnmpError, OSError) as e:
            raise TransportError(f"SNMP walk on {self.host} failed: {e}") from e

    async def _create_target(self):
        """Create the UDP transport for IPv4 or IPv6"""
        use_ipv6 = self.ip_version == 6 or (self.ip_version is None and ":" in str(self.host))
        target_class = Udp6TransportTarget if use_ipv6 else UdpTransportTarget
        return await target_class.create(
            (self.host, self.port),
            timeout=self.timeout,
            retries=self.retries
        )

    async def _walk_all(self, root_oids: List[str]) -> List[SnmpSample]:
        engine = SnmpEngine()
        try:
            return await self._walk_with_engine(engine, root_oids)
        finally:
            engine.close_dispatcher()

    async def _walk_with_engine(self, engine: SnmpEngine, root_oids: List[str]) -> List[SnmpSample]:
        target = await self._create_target()
        auth = CommunityData(self.community, mpModel=self.mp_model)
        samples: List[SnmpSample] = []

        for root_oid in root_oids:
            count = 0
            async for error_indication, error_status, error_index, var_binds in walk_cmd(
                engine,
                auth,
                target,
                ContextData(),
                ObjectType(ObjectIdentity(root_oid.lstrip("."))),
                lexicographicMode=False,
                lookupMib=False
            ):
                if error_indication:
                    raise TransportError(f"SNMP walk on {self.host} failed: {error_indication}")
                if error_status:
                    raise TransportError(
                        f"SNMP error on {self.host}: {error_status.prettyPrint()} at index {error_index}"
                    )

                for var_bind in var_binds:
                    oid, value = var_bind[0], var_bind[1]
                    samples.append(SnmpSample(
                        oid=f".{oid}",
                        value=value.prettyPrint(),
                        type=value.__class__.__name__
                    ))
                    count += 1

            logger.debug(f"{self.source_name}: {count} samples below {root_oid}")

        return samples

    def disconnect(self) -> None:
        """Nothing stays open between walks"""
        self._connected = False
