import logging
from typing import List

from pydantic import BaseModel, Field

from FrontDesk_V1.console_style import red
from FrontDesk_V1.data.cafe_catalog import get_cafe_catalog
from FrontDesk_V1.domain.types import MenuItem
from FrontDesk_V1.ui.display import display_cafe_menu
from FrontDesk_V1.utils import format_currency_rs, get_input

logger = logging.getLogger(__name__)


class CafeOrder(BaseModel):
    """Running bill for one cafe visit.

    Selecting the same item twice simply adds its price again, there is no
    separate quantity.
    """

    catalog: List[MenuItem] = Field(default_factory=get_cafe_catalog)
    currency_label: str = "Rs."
    total: float = 0.0

    def add_item(self, choice: int) -> bool:
        """Add the price of the 1-based ``choice`` to the total.

        Out-of-range choices leave the total unchanged and return False.
        """
        if 0 < choice <= len(self.catalog):
            item = self.catalog[choice - 1]
            self.total += item.price
            logger.debug("Added %s, total now %s", item.name, self.total)
            return True
        return False

    def place_order(self) -> float:
        """Prompt for items until checkout (0), then print and return the bill."""
        while True:
            display_cafe_menu(self.catalog, self.currency_label)
            choice = get_input(
                input_message="Select Item: ",
                fn_validation=lambda x: True,
            )
            if choice == 0:
                break
            if not self.add_item(choice):
                print(red("Invalid Choice!"))

        logger.info("Cafe checkout, total %s", self.total)
        print(f"Total Bill: {format_currency_rs(self.total, self.currency_label)}")
        return self.total
