"""
Integrated Lights-Out extractor.
"""

from typing import Dict

from .base_extractor import TableExtractor
from ..exceptions import NoDataError
from ..models import DeviceClass, Ilo
from ..tables import SnmpTable


class IloExtractor(TableExtractor):
    """Maps the cpqSm2Cntlr scalars to a single Ilo record"""

    @property
    def device_class(self) -> DeviceClass:
        return DeviceClass.ILO

    @property
    def no_data_message(self) -> str:
        return "No HP iLO data found!"

    def extract_row(self, table: SnmpTable, index: str, row: Dict[str, str]) -> Ilo:
        return Ilo(
            model=Ilo.normalize_model(self._decode(table, row, "model")),
            firmware=self._text(row, "firmware")
        )

    def extract_one(self, table: SnmpTable) -> Ilo:
        """
        Extract the iLO of this host.

        Raises:
            NoDataError: If neither model nor firmware was reported
        """
        ilo = self.extract(table)[0]
        if not ilo.model and not ilo.firmware:
            raise NoDataError(self.no_data_message, device_class=self.device_class.value)
        return ilo
