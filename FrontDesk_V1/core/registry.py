import logging
from typing import Optional

from pydantic import BaseModel

from FrontDesk_V1.console_style import green
from FrontDesk_V1.domain.beds import BedManager
from FrontDesk_V1.domain.types import Patient
from FrontDesk_V1.utils import get_input, prompt_text

logger = logging.getLogger(__name__)


class PatientRegistry(BaseModel):
    """Registers patients against the bed pool it was given."""

    bed_manager: BedManager

    def register_patient(self) -> Optional[Patient]:
        """Interactive registration flow.

        Reads name, age and patient id, then asks the bed manager for one bed.
        Returns the patient when a bed was allocated, None otherwise; in the
        latter case the bed manager's shortage message is the only feedback.
        """
        name = prompt_text("Enter Name: ")
        age = get_input(
            input_message="Enter Age: ",
            fn_validation=lambda x: True,
            error_message="⚠️ Age must be a whole number.",
        )
        patient_id = get_input(
            input_message="Enter Patient ID: ",
            fn_validation=lambda x: True,
            error_message="⚠️ Patient ID must be a whole number.",
        )
        patient = Patient(name=name, age=age, patient_id=patient_id)

        if not self.bed_manager.allocate():
            return None
        logger.info("Registered patient %s (id %d)", patient.name, patient.patient_id)
        print(green("Patient Registered Successfully!"))
        return patient
