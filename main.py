import logging
import sys

from FrontDesk_V1.core.system import FAREWELL, build_system
from FrontDesk_V1.data.settings import DefaultSettings


def run():
    logging.basicConfig(
        level=logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # GENERAL by default, BedCategory.ICU works the same way
    settings = DefaultSettings()
    system = build_system(settings)
    try:
        system.run()
    except (EOFError, KeyboardInterrupt):
        print()
        print(FAREWELL)


if __name__ == "__main__":
    run()
