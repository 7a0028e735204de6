import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from pydantic import BaseModel

from FrontDesk_V1.console_style import red
from FrontDesk_V1.core.cafe_order import CafeOrder
from FrontDesk_V1.core.registry import PatientRegistry
from FrontDesk_V1.domain.beds import BedManager
from FrontDesk_V1.ui.display import display_hospital_menu
from FrontDesk_V1.utils import get_input

logger = logging.getLogger(__name__)


class Service(BaseModel, ABC):
    """A flow selectable from the main menu."""

    LABEL: ClassVar[str] = ""

    @abstractmethod
    def execute(self) -> None: ...


class HospitalService(Service):
    """Hospital sub-menu: register patients or look at the bed count."""

    LABEL: ClassVar[str] = "Hospital Services"

    bed_manager: BedManager

    def execute(self) -> None:
        registry = PatientRegistry(bed_manager=self.bed_manager)
        while True:
            display_hospital_menu()
            choice = get_input(
                input_message="Enter Choice: ",
                fn_validation=lambda x: True,
            )
            if choice == 0:
                return
            if choice == 1:
                registry.register_patient()
            elif choice == 2:
                self.bed_manager.report()
            else:
                print(red("Invalid Choice!"))


class CafeService(Service):
    LABEL: ClassVar[str] = "Cafe"

    currency_label: str = "Rs."

    def execute(self) -> None:
        # New bill for each visit
        CafeOrder(currency_label=self.currency_label).place_order()
