"""
Record codec: one entity <-> one comma-separated line.

Free-text fields are written as-is. A ',' or ';' inside a name, contact or
password will break the record; the console prompts refuse those characters.
"""
import logging
from typing import List, Tuple

from core.errors import CorruptRecordError
from models.gym_class import GymClass
from models.trainee import Trainee
from models.trainer import Trainer

logger = logging.getLogger(__name__)

FIELD_SEP = ","
ID_SEP = ";"

TRAINER_FIELDS = 5
TRAINEE_FIELDS = 9
CLASS_FIELDS = 6
ADMIN_FIELDS = 2


def _split(line: str, expected: int) -> List[str]:
    parts = line.rstrip("\r\n").split(FIELD_SEP)
    if len(parts) != expected:
        raise CorruptRecordError(line, f"expected {expected} fields, got {len(parts)}")
    return parts


def _to_int(value: str, line: str, name: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise CorruptRecordError(line, f"{name} is not an integer")


def _to_float(value: str, line: str, name: str) -> float:
    try:
        return float(value.strip())
    except ValueError:
        raise CorruptRecordError(line, f"{name} is not a number")


# --- TRAINER ---

def encode_trainer(t: Trainer) -> str:
    return FIELD_SEP.join([str(t.id), t.name, t.specialization, t.contact, t.password])


def decode_trainer(line: str) -> Trainer:
    id_str, name, specialization, contact, password = _split(line, TRAINER_FIELDS)
    return Trainer(
        id=_to_int(id_str, line, "id"),
        name=name,
        specialization=specialization,
        contact=contact,
        password=password,
    )


# --- TRAINEE ---

def encode_trainee(t: Trainee) -> str:
    # Six decimals keeps files written by older versions byte-identical
    return FIELD_SEP.join([
        str(t.id), t.name, t.contact, t.password,
        t.membership_package, str(t.membership_duration_months), t.payment_status,
        f"{t.height_m:f}", f"{t.weight_kg:f}",
    ])


def decode_trainee(line: str) -> Trainee:
    parts = _split(line, TRAINEE_FIELDS)
    return Trainee(
        id=_to_int(parts[0], line, "id"),
        name=parts[1],
        contact=parts[2],
        password=parts[3],
        membership_package=parts[4],
        membership_duration_months=_to_int(parts[5], line, "duration"),
        payment_status=parts[6],
        height_m=_to_float(parts[7], line, "height"),
        weight_kg=_to_float(parts[8], line, "weight"),
    )


# --- GYM CLASS ---

def encode_class(c: GymClass) -> str:
    ids = ID_SEP.join(str(i) for i in c.enrolled_trainee_ids)
    return FIELD_SEP.join([c.class_name, c.schedule, c.trainer_name, str(c.capacity), str(c.enrolled), ids])


def decode_class(line: str) -> GymClass:
    name, schedule, trainer_name, cap_str, enrolled_str, ids_str = _split(line, CLASS_FIELDS)
    capacity = _to_int(cap_str, line, "capacity")
    enrolled = _to_int(enrolled_str, line, "enrolled")

    ids = [_to_int(i, line, "trainee id") for i in ids_str.split(ID_SEP) if i.strip()]

    if enrolled != len(ids):
        logger.warning(
            "Class '%s' stores enrolled=%d but lists %d trainee ids; using the id list.",
            name, enrolled, len(ids),
        )

    return GymClass(
        class_name=name,
        schedule=schedule,
        trainer_name=trainer_name,
        capacity=capacity,
        enrolled_trainee_ids=ids,
    )


# --- ADMIN ---

def encode_admin(username: str, password: str) -> str:
    return FIELD_SEP.join([username, password])


def decode_admin(line: str) -> Tuple[str, str]:
    username, password = _split(line, ADMIN_FIELDS)
    return username, password
