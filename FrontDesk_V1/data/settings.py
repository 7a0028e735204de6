from dataclasses import dataclass

from FrontDesk_V1.domain.types import BedCategory


@dataclass
class DefaultSettings:
    hospital_name: str = "XYZ Hospital"
    bed_category: BedCategory = BedCategory.GENERAL
    bed_capacity: int = 500
    currency_label: str = "Rs."
