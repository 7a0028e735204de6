from FrontDesk_V1.core.cafe_order import CafeOrder
from FrontDesk_V1.core.registry import PatientRegistry
from FrontDesk_V1.core.services import CafeService, HospitalService, Service
from FrontDesk_V1.core.system import HospitalManagementSystem, build_system

__all__ = [
    "CafeOrder",
    "CafeService",
    "HospitalManagementSystem",
    "HospitalService",
    "PatientRegistry",
    "Service",
    "build_system",
]
