# frontdesk/ui/display.py
from typing import Sequence

from FrontDesk_V1.console_style import bold
from FrontDesk_V1.domain.types import MenuItem
from FrontDesk_V1.utils import format_currency_rs


def display_welcome(hospital_name: str, labels: Sequence[str]) -> None:
    """Print the main banner with one numbered line per service."""
    print(bold(f"**** Welcome to {hospital_name} Management System ****"))
    for i, label in enumerate(labels, 1):
        print(f"[{i}] {label}")
    print("[0] Exit")


def display_hospital_menu() -> None:
    print("[1] Register Patient")
    print("[2] View Bed Capacity")
    print("[0] Back to Main Menu")


def display_cafe_menu(catalog: Sequence[MenuItem], currency_label: str = "Rs.") -> None:
    """Print the catalog with 1-based indices followed by the checkout option."""
    for i, item in enumerate(catalog, 1):
        print(f"[{i}] {item.name} - {format_currency_rs(item.price, currency_label)}")
    print("[0] Checkout")
