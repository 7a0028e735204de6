import logging
from typing import ClassVar, Dict, Type

from pydantic import BaseModel, Field

from FrontDesk_V1.console_style import red
from FrontDesk_V1.domain.types import BedCategory

logger = logging.getLogger(__name__)


class BedManager(BaseModel):
    """Bed pool for a single ward category.

    Variants only change the per-subclass constants below; counting and
    allocation are shared.
    """

    # Per-subclass constants
    CATEGORY: ClassVar[BedCategory] = BedCategory.GENERAL
    LABEL: ClassVar[str] = "General"
    SHORTAGE_NAME: ClassVar[str] = "general"

    capacity: int = Field(default=0, ge=0)

    @property
    def remaining(self) -> int:
        return self.capacity

    def report(self) -> None:
        print(f"Available {self.LABEL} Beds: {self.capacity}")

    def allocate(self) -> bool:
        """Take one bed from the pool.

        Returns True and decrements the capacity when a bed is free.
        Otherwise prints the shortage message and leaves the pool untouched.
        """
        if self.capacity > 0:
            self.capacity -= 1
            logger.debug("%s bed allocated, %d left", self.LABEL, self.capacity)
            return True
        logger.warning("%s bed pool exhausted", self.LABEL)
        print(red(f"No {self.SHORTAGE_NAME} beds available!"))
        return False


class GeneralBedManager(BedManager):
    CATEGORY: ClassVar[BedCategory] = BedCategory.GENERAL
    LABEL: ClassVar[str] = "General"
    SHORTAGE_NAME: ClassVar[str] = "general"


class ICUBedManager(BedManager):
    CATEGORY: ClassVar[BedCategory] = BedCategory.ICU
    LABEL: ClassVar[str] = "ICU"
    SHORTAGE_NAME: ClassVar[str] = "ICU"


BED_MANAGERS: Dict[BedCategory, Type[BedManager]] = {
    BedCategory.GENERAL: GeneralBedManager,
    BedCategory.ICU: ICUBedManager,
}


def make_bed_manager(category: BedCategory, capacity: int) -> BedManager:
    """Build the bed manager variant matching ``category``.

    Raises pydantic.ValidationError when ``capacity`` is negative.
    """
    return BED_MANAGERS[category](capacity=capacity)
