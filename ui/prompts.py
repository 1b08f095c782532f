"""
Console input helpers.
Every prompt re-asks until the input is valid. End of input (EOFError)
propagates to the console app, which exits cleanly.
"""
import getpass
from typing import Callable, Optional, TypeVar

from core.codec import FIELD_SEP, ID_SEP
from core.utils import is_valid_contact, normalize_schedule

N = TypeVar("N", int, float)

# Characters that would split a stored record
RESERVED_CHARS = FIELD_SEP + ID_SEP


def _has_reserved(value: str) -> bool:
    return any(ch in value for ch in RESERVED_CHARS)


def get_numeric_input(prompt: str, cast: Callable[[str], N] = int,
                      min_value: Optional[N] = None, max_value: Optional[N] = None) -> N:
    """
    Reads a number, optionally bounded (inclusive).

    Args:
        cast: int or float.
    """
    while True:
        raw = input(prompt).strip()
        try:
            value = cast(raw)
        except ValueError:
            print("Error: Invalid input. Please enter a valid number.")
            continue

        if (min_value is not None and value < min_value) or (max_value is not None and value > max_value):
            print(f"Error: Input must be between {min_value} and {max_value}. Please try again.")
            continue
        return value


def get_non_empty_string(prompt: str) -> str:
    """Reads a trimmed, non-empty string without ',' or ';'."""
    while True:
        value = input(prompt).strip()
        if not value:
            print("Error: Input cannot be empty. Please try again.")
        elif _has_reserved(value):
            print("Error: Input cannot contain ',' or ';'. Please try again.")
        else:
            return value


def get_contact_number(prompt: str) -> str:
    while True:
        contact = get_non_empty_string(prompt)
        if len(contact) != 10:
            print("Error: Contact number must be exactly 10 digits.")
        elif not is_valid_contact(contact):
            print("Error: Contact number must contain only digits.")
        else:
            return contact


def confirm_action(prompt: str) -> bool:
    """Asks until the answer starts with 'y' or 'n'."""
    while True:
        choice = get_non_empty_string(prompt)[0].lower()
        if choice == 'y':
            return True
        if choice == 'n':
            return False
        print("Error: Please enter 'y' for yes or 'n' for no.")


def get_valid_schedule(prompt: str) -> str:
    while True:
        try:
            return normalize_schedule(get_non_empty_string(prompt))
        except ValueError as e:
            print(f"Error: {e}")


def get_hidden_password(prompt: str) -> str:
    """
    Reads a password with terminal echo turned off.
    """
    while True:
        password = getpass.getpass(prompt)
        if not password:
            print("Error: Password cannot be empty. Please try again.")
        elif _has_reserved(password):
            print("Error: Password cannot contain ',' or ';'. Please try again.")
        else:
            return password
