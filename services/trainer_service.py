import logging
from typing import List, Optional, Tuple

from core import database
from core.errors import DuplicateIDError, NotFoundError
from core.utils import is_valid_contact
from models.gym_class import GymClass
from models.trainee import Trainee
from models.trainer import Trainer
from services.auth_service import hash_password

logger = logging.getLogger(__name__)


def find_trainer(trainer_id: int) -> Optional[Trainer]:
    for t in database.load_trainers():
        if t.id == trainer_id:
            return t
    return None


def trainer_exists(trainer_id: int) -> bool:
    return find_trainer(trainer_id) is not None


def list_trainers() -> List[Trainer]:
    return database.load_trainers()


def add_trainer(trainer_id: int, name: str, specialization: str, contact: str, password: str) -> Trainer:
    """
    Adds a new trainer.

    Raises:
        DuplicateIDError: If the ID is already taken.
        ValueError: If the contact number is not 10 digits.
    """
    if not is_valid_contact(contact):
        raise ValueError("Contact number must be exactly 10 digits.")

    trainers = database.load_trainers()
    if any(t.id == trainer_id for t in trainers):
        raise DuplicateIDError(f"Trainer ID {trainer_id} already exists.")

    trainer = Trainer(trainer_id, name, specialization, contact, hash_password(password))
    trainers.append(trainer)
    database.save_trainers(trainers)
    logger.info("Added trainer %d (%s)", trainer_id, name)
    return trainer


def update_trainer_profile(trainer_id: int, name: str, specialization: str, contact: str, password: str) -> Trainer:
    """
    Replaces a trainer's profile fields.
    Classes keep the trainer name they were created with.
    """
    if not is_valid_contact(contact):
        raise ValueError("Contact number must be exactly 10 digits.")

    trainers = database.load_trainers()
    for t in trainers:
        if t.id == trainer_id:
            t.name = name
            t.specialization = specialization
            t.contact = contact
            t.password = hash_password(password)
            database.save_trainers(trainers)
            logger.info("Updated profile of trainer %d", trainer_id)
            return t
    raise NotFoundError("Trainer not found!")


def delete_trainer(trainer_id: int) -> int:
    """
    Deletes a trainer and every class they teach (matched by name).

    Returns:
        int: Number of classes removed with the trainer.

    Raises:
        NotFoundError: If no trainer has this ID.
    """
    trainers = database.load_trainers()
    target = next((t for t in trainers if t.id == trainer_id), None)
    if target is None:
        raise NotFoundError("Trainer not found!")

    database.save_trainers([t for t in trainers if t.id != trainer_id])

    classes = database.load_classes()
    kept = [c for c in classes if c.trainer_name != target.name]
    removed = len(classes) - len(kept)
    if removed:
        database.save_classes(kept)

    logger.info("Deleted trainer %d (%s) and %d classes", trainer_id, target.name, removed)
    return removed


# --- TRAINER VIEWS ---

def classes_for_trainer(trainer_name: str) -> List[GymClass]:
    return [c for c in database.load_classes() if c.trainer_name == trainer_name]


def trainees_for_trainer(trainer_name: str) -> List[Tuple[GymClass, List[Trainee]]]:
    """
    Pairs each class taught by the trainer with its enrolled trainees, in signup order.
    Enrolled ids with no matching trainee record are skipped.
    """
    by_id = {t.id: t for t in database.load_trainees()}
    return [
        (c, [by_id[i] for i in c.enrolled_trainee_ids if i in by_id])
        for c in classes_for_trainer(trainer_name)
    ]
