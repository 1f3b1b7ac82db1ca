"""
Integrated Lights-Out record - Value Object pattern.
"""

import re
from dataclasses import dataclass
from typing import ClassVar, Optional

from .status import DeviceClass

ILO_NAMES = {
    "ilo3": "iLO 3",
    "ilo4": "iLO 4",
    "ilo5": "iLO 5",
    "ilo6": "iLO 6",
}


@dataclass(frozen=True)
class Ilo:
    """
    Immutable remote-management unit data.

    Attributes:
        model: Product line key ('ilo4', 'ilo5', ...) or the raw model value
        firmware: Firmware revision (e.g. '2.78')
    """
    model: str
    firmware: str = ""

    device_class: ClassVar[DeviceClass] = DeviceClass.ILO

    # 'iLO 5', 'ilo5', 'Integrated Lights-Out 5'
    MODEL_PATTERN: ClassVar[re.Pattern] = re.compile(
        r'^(?:ilo|integrated\s+lights-out)\s*(\d+)$', re.IGNORECASE
    )

    @property
    def name(self) -> str:
        return ILO_NAMES.get(self.model, self.model)

    def describe(self) -> str:
        """Neutral description echoed in every result message"""
        return f"Integrated Lights-Out {self.name} revision {self.firmware}"

    @classmethod
    def normalize_model(cls, value: Optional[str]) -> str:
        """
        Normalize a model name to its product line key.

        Args:
            value: Model name as reported by the device

        Returns:
            Key like 'ilo5', or the stripped input if it is not recognized

        Examples:
            >>> Ilo.normalize_model('iLO 5')
            'ilo5'
        """
        if not value:
            return ""
        value = value.strip()
        match = cls.MODEL_PATTERN.match(value)
        if match:
            return f"ilo{match.group(1)}"
        return value
