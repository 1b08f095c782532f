import datetime
import re
from typing import Optional, Tuple

# Calendar order; datetime.weekday() indexes this list (Monday == 0)
WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

SCHEDULE_PATTERN = re.compile(r"^(Mon|Tue|Wed|Thu|Fri|Sat|Sun)-([01][0-9]|2[0-3]):([0-5][0-9])$", re.IGNORECASE)


def normalize_schedule(schedule: str) -> str:
    """
    Validates a "Day-HH:MM" schedule string and capitalises the day.
    Example: 'sat-14:30' -> 'Sat-14:30'.

    Raises:
        ValueError: If the string does not match the format.
    """
    schedule = schedule.strip()
    if not SCHEDULE_PATTERN.match(schedule):
        raise ValueError("Invalid format. Please use Day-HH:MM (e.g., 'Mon-10:00' or 'Sat-14:30').")
    return schedule[0].upper() + schedule[1:3].lower() + schedule[3:]


def schedule_sort_key(schedule: str) -> Tuple[int, str]:
    """
    Sort key putting schedules in calendar order (Mon..Sun, then time).
    Unknown day prefixes sort after Sunday.
    """
    day, _, time = schedule.partition("-")
    try:
        index = WEEKDAYS.index(day)
    except ValueError:
        index = len(WEEKDAYS)
    return index, time


def day_code(date: Optional[datetime.date] = None) -> str:
    """
    Returns the three-letter code of the given date's weekday.
    Defaults to today on the local clock.
    """
    if not date:
        date = datetime.date.today()
    return WEEKDAYS[date.weekday()]


def is_valid_contact(contact: str) -> bool:
    """A contact number is exactly 10 digits."""
    return re.fullmatch(r"[0-9]{10}", contact) is not None
