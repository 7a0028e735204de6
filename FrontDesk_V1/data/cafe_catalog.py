"""
Cafe catalog: fixed, ordered list of items sold at the counter.
"""

from typing import List

from FrontDesk_V1.domain.types import MenuItem

CAFE_CATALOG: List[MenuItem] = [
    MenuItem(name="Tea", price=450),
    MenuItem(name="Coffee", price=550),
    MenuItem(name="Sandwich", price=600),
    MenuItem(name="Cookie", price=400),
]


def get_cafe_catalog() -> List[MenuItem]:
    # Items are frozen, a shallow copy keeps the catalog order read-only
    return list(CAFE_CATALOG)
