import datetime
import logging
from typing import List, Optional, Tuple

from core import database
from core.errors import (
    AlreadyEnrolledError, ClassFullError, ClassNotFoundError, NotPremiumError, UnknownTrainerError,
)
from core.utils import WEEKDAYS, day_code, normalize_schedule, schedule_sort_key
from models.gym_class import GymClass
from models.trainee import Trainee

logger = logging.getLogger(__name__)

MIN_CAPACITY, MAX_CAPACITY = 1, 100


# --- CLASS MANAGEMENT ---

def add_class(class_name: str, schedule: str, trainer_name: str, capacity: int) -> GymClass:
    """
    Schedules a new class taught by an existing trainer.
    Class names are not required to be unique.

    Args:
        schedule (str): "Day-HH:MM"; the day is case-insensitive.
        capacity (int): 1 to 100 seats.

    Raises:
        UnknownTrainerError: If no trainer has exactly this name.
        ValueError: If the schedule or capacity is invalid.
    """
    schedule = normalize_schedule(schedule)
    if not MIN_CAPACITY <= capacity <= MAX_CAPACITY:
        raise ValueError(f"Capacity must be between {MIN_CAPACITY} and {MAX_CAPACITY}.")

    if not any(t.name == trainer_name for t in database.load_trainers()):
        raise UnknownTrainerError("Trainer name not found! Class not added.")

    gym_class = GymClass(class_name, schedule, trainer_name, capacity)
    classes = database.load_classes()
    classes.append(gym_class)
    database.save_classes(classes)
    logger.info("Added class '%s' at %s with %s", class_name, schedule, trainer_name)
    return gym_class


def delete_class(class_name: str) -> int:
    """
    Deletes every class with this exact name.

    Returns:
        int: Number of classes removed.

    Raises:
        ClassNotFoundError: If no class has this name.
    """
    classes = database.load_classes()
    kept = [c for c in classes if c.class_name != class_name]
    removed = len(classes) - len(kept)
    if not removed:
        raise ClassNotFoundError("Class not found!")

    database.save_classes(kept)
    logger.info("Deleted %d class(es) named '%s'", removed, class_name)
    return removed


# --- ENROLLMENT ---

def sign_up_for_class(trainee: Trainee, class_name: str) -> GymClass:
    """
    Enrolls a Premium trainee in the first class with this name.

    Raises:
        NotPremiumError: Basic members can not take classes.
        ClassNotFoundError: If no class has this name.
        AlreadyEnrolledError: If the trainee already holds a seat (nothing changes).
        ClassFullError: If every seat is taken (nothing changes).
    """
    if not trainee.is_premium:
        raise NotPremiumError()

    classes = database.load_classes()
    gym_class = next((c for c in classes if c.class_name == class_name), None)
    if gym_class is None:
        raise ClassNotFoundError("Class not found!")

    if trainee.id in gym_class.enrolled_trainee_ids:
        raise AlreadyEnrolledError("You are already enrolled in this class.")
    if gym_class.is_full:
        raise ClassFullError("Class is full!")

    gym_class.enrolled_trainee_ids.append(trainee.id)
    database.save_classes(classes)
    logger.info("Trainee %d signed up for '%s' (%d/%d)",
                trainee.id, class_name, gym_class.enrolled, gym_class.capacity)
    return gym_class


# --- SCHEDULES ---

def sorted_classes() -> List[GymClass]:
    """All classes in calendar order (Mon..Sun, then start time)."""
    return sorted(database.load_classes(), key=lambda c: schedule_sort_key(c.schedule))


def weekly_schedule() -> List[Tuple[str, List[GymClass]]]:
    """
    Groups every class by day, Monday first.
    Days with no classes are included with an empty list.
    """
    classes = sorted_classes()
    return [(day, [c for c in classes if c.day == day]) for day in WEEKDAYS]


def daily_schedule(date: Optional[datetime.date] = None) -> Tuple[str, List[GymClass]]:
    """
    Classes held on the given date's weekday (today on the local clock by default).

    Returns:
        Tuple[str, List[GymClass]]: The day code and its classes in time order.
    """
    today = day_code(date)
    return today, [c for c in sorted_classes() if c.day == today]
