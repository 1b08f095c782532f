import logging
from typing import Callable, Dict, List, Optional, Any

import config
from core import database
from core.errors import DuplicateIDError, NotFoundError
from core.utils import is_valid_contact
from models.trainee import Trainee
from services.auth_service import hash_password
from services.health_service import compute_bmi

logger = logging.getLogger(__name__)

MIN_HEIGHT_M, MAX_HEIGHT_M = 0.5, 3.0
MIN_WEIGHT_KG, MAX_WEIGHT_KG = 20.0, 300.0


def get_cost(package: str, duration: int) -> int:
    """
    Looks up the price of a membership.

    Args:
        package (str): 'Basic' or 'Premium'.
        duration (int): 3 or 6 months.

    Raises:
        ValueError: If the combination is not on the price table.
    """
    try:
        return config.PACKAGE_COSTS[(package, duration)]
    except KeyError:
        raise ValueError(f"No price for a {package} membership of {duration} months")


# --- LOOKUPS ---

def find_trainee(trainee_id: int) -> Optional[Trainee]:
    for t in database.load_trainees():
        if t.id == trainee_id:
            return t
    return None


def trainee_exists(trainee_id: int) -> bool:
    return find_trainee(trainee_id) is not None


def list_trainees() -> List[Trainee]:
    return database.load_trainees()


def payment_report() -> List[Dict[str, Any]]:
    """
    Summarises each trainee's membership and payment status for the admin.
    """
    return [
        {
            'id': t.id,
            'name': t.name,
            'package': t.membership_package,
            'duration': t.membership_duration_months,
            'status': t.payment_status,
        }
        for t in database.load_trainees()
    ]


# --- REGISTRATION ---

def register_trainee(trainee_id: int, name: str, contact: str, package: str, duration: int,
                     password: str, confirm: Callable[[int], bool]) -> Optional[Trainee]:
    """
    Registers a new trainee after a confirmation step.

    Args:
        confirm (Callable[[int], bool]): Receives the membership cost and
            returns True to commit. Nothing is saved if it returns False.

    Returns:
        Trainee: The saved trainee, or None if registration was cancelled.

    Raises:
        DuplicateIDError: If the ID is already registered.
        ValueError: If the contact, package or duration is invalid.
    """
    if not is_valid_contact(contact):
        raise ValueError("Contact number must be exactly 10 digits.")
    cost = get_cost(package, duration)

    trainees = database.load_trainees()
    if any(t.id == trainee_id for t in trainees):
        raise DuplicateIDError(f"Trainee ID {trainee_id} already exists.")

    if not confirm(cost):
        logger.info("Registration of trainee %d cancelled", trainee_id)
        return None

    trainee = Trainee(
        id=trainee_id,
        name=name,
        contact=contact,
        password=hash_password(password),
        membership_package=package,
        membership_duration_months=duration,
        payment_status="Paid",
    )
    trainees.append(trainee)
    database.save_trainees(trainees)
    logger.info("Registered trainee %d (%s, %d months, $%d)", trainee_id, package, duration, cost)
    return trainee


# --- PROFILE UPDATES ---

def _replace_trainee(trainee_id: int, update: Callable[[Trainee], None]) -> Trainee:
    trainees = database.load_trainees()
    for t in trainees:
        if t.id == trainee_id:
            update(t)
            database.save_trainees(trainees)
            return t
    raise NotFoundError("Trainee not found!")


def update_trainee_profile(trainee_id: int, name: str, contact: str, password: str) -> Trainee:
    """
    Replaces a trainee's name, contact and password.
    Membership, payment status and body metrics are kept.
    """
    if not is_valid_contact(contact):
        raise ValueError("Contact number must be exactly 10 digits.")

    def apply(t: Trainee) -> None:
        t.name = name
        t.contact = contact
        t.password = hash_password(password)

    updated = _replace_trainee(trainee_id, apply)
    logger.info("Updated profile of trainee %d", trainee_id)
    return updated


def record_body_metrics(trainee_id: int, height_m: float, weight_kg: float) -> float:
    """
    Stores a trainee's height and weight.

    Returns:
        float: The resulting BMI.
    """
    if not MIN_HEIGHT_M <= height_m <= MAX_HEIGHT_M:
        raise ValueError(f"Height must be between {MIN_HEIGHT_M} and {MAX_HEIGHT_M} meters.")
    if not MIN_WEIGHT_KG <= weight_kg <= MAX_WEIGHT_KG:
        raise ValueError(f"Weight must be between {MIN_WEIGHT_KG} and {MAX_WEIGHT_KG} kg.")

    def apply(t: Trainee) -> None:
        t.height_m = height_m
        t.weight_kg = weight_kg

    updated = _replace_trainee(trainee_id, apply)
    return compute_bmi(updated.height_m, updated.weight_kg)


# --- DELETION ---

def delete_trainee(trainee_id: int) -> None:
    """
    Removes a trainee and every enrollment they hold.
    Each class drops one enrolled seat per occurrence of the id.

    Raises:
        NotFoundError: If no trainee has this ID.
    """
    trainees = database.load_trainees()
    remaining = [t for t in trainees if t.id != trainee_id]
    if len(remaining) == len(trainees):
        raise NotFoundError("Trainee not found!")
    database.save_trainees(remaining)

    classes = database.load_classes()
    touched = 0
    for c in classes:
        before = len(c.enrolled_trainee_ids)
        c.enrolled_trainee_ids = [i for i in c.enrolled_trainee_ids if i != trainee_id]
        if len(c.enrolled_trainee_ids) != before:
            touched += 1
    if touched:
        database.save_classes(classes)

    logger.info("Deleted trainee %d (removed from %d classes)", trainee_id, touched)
