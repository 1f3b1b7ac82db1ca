"""
HPE iLO Redfish client - reads the iLO model and firmware over HTTPS.

Used instead of the CPQSM2-MIB scalars when a Redfish host is configured.
"""

import logging
import re
from typing import Dict, Optional

import requests
from urllib3 import disable_warnings
from urllib3.exceptions import InsecureRequestWarning

from ..exceptions import NoDataError, TransportError
from ..models import Ilo

disable_warnings(InsecureRequestWarning)
logger = logging.getLogger(__name__)


class RedfishIloStrategy:
    """HPE iLO Redfish manager reader"""

    SESSIONS_PATH = "/redfish/v1/SessionService/Sessions"
    MANAGER_PATH = "/redfish/v1/Managers/1"

    # 'iLO 5 v2.72', '2.72 Feb 03 2023'
    VERSION_PATTERN = re.compile(r'v?(\d+(?:\.\d+)+)')

    def __init__(self, credentials: Dict[str, str], timeout: int = 30):
        """
        Initialize client with credentials.

        Args:
            credentials: 'host', 'username' and 'password'
            timeout: Request timeout in seconds
        """
        self.credentials = credentials
        self.timeout = timeout
        self.base_url = f"https://{credentials.get('host')}" if credentials.get('host') else None
        self._session: Optional[requests.Session] = None
        self._auth_token: Optional[str] = None
        self._session_uri: Optional[str] = None

    def is_configured(self) -> bool:
        """Check if Redfish credentials are configured"""
        return all([
            self.credentials.get("host"),
            self.credentials.get("username"),
            self.credentials.get("password")
        ])

    def ensure_connected(self) -> None:
        """Log in to the iLO Redfish service"""
        if self._session and self._auth_token:
            return

        logger.info(f"Connecting to iLO Redfish at {self.credentials.get('host')}...")
        self._session = requests.Session()
        self._session.verify = False

        auth_data = {
            "UserName": self.credentials["username"],
            "Password": self.credentials["password"]
        }

        try:
            response = self._session.post(
                f"{self.base_url}{self.SESSIONS_PATH}",
                json=auth_data,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            self._session.close()
            self._session = None
            raise TransportError(f"Redfish login to {self.credentials.get('host')} failed: {e}") from e

        self._auth_token = response.headers.get("X-Auth-Token")
        self._session_uri = response.headers.get("Location")
        self._session.headers.update({"X-Auth-Token": self._auth_token or ""})
        logger.info("Successfully connected to iLO Redfish")

    def get_ilo(self) -> Ilo:
        """
        Read the iLO model and firmware.

        Returns:
            Ilo record

        Raises:
            TransportError: If the request fails
            NoDataError: If the manager resource has no model or firmware
        """
        self.ensure_connected()

        try:
            response = self._session.get(f"{self.base_url}{self.MANAGER_PATH}", timeout=self.timeout)
            response.raise_for_status()
            manager = response.json()
        except (requests.RequestException, ValueError) as e:
            raise TransportError(f"Failed to retrieve iLO manager data: {e}") from e

        return self._extract_ilo(manager)

    def _extract_ilo(self, manager: dict) -> Ilo:
        """Build an Ilo record from a Redfish manager resource"""
        model = Ilo.normalize_model(manager.get("Model"))
        firmware_text = manager.get("FirmwareVersion") or ""

        if not model and not firmware_text:
            raise NoDataError("No HP iLO data found!", device_class="ilo")

        # 'iLO 5 v2.72' carries the model too
        match = self.VERSION_PATTERN.search(firmware_text)
        firmware = match.group(1) if match else firmware_text.strip()

        if not model and firmware_text:
            model = Ilo.normalize_model(firmware_text[:match.start()] if match else firmware_text)

        return Ilo(model=model, firmware=firmware)

    def disconnect(self) -> None:
        """Log out from the iLO Redfish service"""
        if self._session and self._auth_token:
            try:
                if self._session_uri:
                    uri = self._session_uri
                    if not uri.startswith("http"):
                        uri = f"{self.base_url}{uri}"
                    self._session.delete(uri, timeout=self.timeout)
                logger.info("Successfully disconnected from iLO Redfish")
            except requests.RequestException as e:
                logger.warning(f"Error during iLO Redfish logout: {e}")
            finally:
                self._session.close()
                self._session = None
                self._auth_token = None
                self._session_uri = None
