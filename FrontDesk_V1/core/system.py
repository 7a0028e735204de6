import logging
from typing import List, Optional

from pydantic import BaseModel

from FrontDesk_V1.console_style import red, yellow
from FrontDesk_V1.core.services import CafeService, HospitalService, Service
from FrontDesk_V1.data.settings import DefaultSettings
from FrontDesk_V1.domain.beds import make_bed_manager
from FrontDesk_V1.ui.display import display_welcome
from FrontDesk_V1.utils import get_input

logger = logging.getLogger(__name__)

FAREWELL = "Exiting... Thank you!"


class HospitalManagementSystem(BaseModel):
    """Main menu controller owning the ordered list of services."""

    hospital_name: str = "XYZ Hospital"
    services: List[Service]

    def run(self) -> None:
        """Loop on the main menu until the operator enters 0."""
        while True:
            display_welcome(self.hospital_name, [s.LABEL for s in self.services])
            choice = get_input(
                input_message="Enter Your Choice: ",
                fn_validation=lambda x: True,
            )
            print()

            if choice == 0:
                break
            if 0 < choice <= len(self.services):
                service = self.services[choice - 1]
                logger.debug("Dispatching to %s", service.LABEL)
                service.execute()
            else:
                print(red("Invalid Option! Try again."))

        self.shutdown()

    def shutdown(self) -> None:
        print(yellow(FAREWELL))
        self.services.clear()


def build_system(settings: Optional[DefaultSettings] = None) -> HospitalManagementSystem:
    """Wire the bed pool and the two services from ``settings``.

    The single bed manager is shared by reference with the hospital service.
    """
    settings = settings or DefaultSettings()
    bed_manager = make_bed_manager(settings.bed_category, settings.bed_capacity)
    logger.debug(
        "Starting with %d %s beds", bed_manager.remaining, bed_manager.LABEL
    )
    return HospitalManagementSystem(
        hospital_name=settings.hospital_name,
        services=[
            HospitalService(bed_manager=bed_manager),
            CafeService(currency_label=settings.currency_label),
        ],
    )
