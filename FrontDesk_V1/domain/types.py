# frontdesk/domain/types.py
from enum import Enum

from pydantic import BaseModel, ConfigDict


class BedCategory(Enum):
    GENERAL = "General"
    ICU = "ICU"


# ---------- Patient ----------


class Patient(BaseModel):
    """Identity captured at the desk; never stored past the registration."""

    name: str
    age: int
    patient_id: int


# ---------- MenuItem ----------


class MenuItem(BaseModel):
    """One purchasable cafe line."""

    model_config = ConfigDict(frozen=True)

    name: str
    price: float
