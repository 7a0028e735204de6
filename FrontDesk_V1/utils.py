from typing import Callable

from FrontDesk_V1.console_style import red


def get_input(
    input_message: str,
    fn_validation: Callable,
    error_message: str = "Please enter a whole number.",
):
    """Prompt for an integer with validation.

    - input_message: prompt shown to the user
    - fn_validation: predicate taking the parsed int and returning True if valid
    - error_message: message displayed on invalid input

    End of input is not caught here, it propagates to the entry point.
    """
    while True:
        try:
            result = int(input(input_message).strip())
            if fn_validation(result):
                return result
        except ValueError:
            pass
        print(red(error_message))


def prompt_text(input_message: str) -> str:
    """Read one line of free text, surrounding whitespace removed."""
    return input(input_message).strip()


def format_currency_rs(amount: float, label: str = "Rs.") -> str:
    """
    Format an amount the way the cafe prints prices.

    Examples:
        >>> format_currency_rs(450.0)
        'Rs. 450'
        >>> format_currency_rs(12.5)
        'Rs. 12.5'
    """
    return f"{label} " + f"{amount:.2f}".rstrip("0").rstrip(".")
