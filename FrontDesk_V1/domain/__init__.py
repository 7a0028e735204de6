from FrontDesk_V1.domain.beds import (
    BedManager,
    GeneralBedManager,
    ICUBedManager,
    make_bed_manager,
)
from FrontDesk_V1.domain.types import BedCategory, MenuItem, Patient

__all__ = [
    "BedCategory",
    "BedManager",
    "GeneralBedManager",
    "ICUBedManager",
    "MenuItem",
    "Patient",
    "make_bed_manager",
]
