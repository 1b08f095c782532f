import logging
from pathlib import Path
from typing import Callable, List, Tuple, TypeVar

import config
from core import codec
from core.errors import CorruptRecordError
from models.gym_class import GymClass
from models.trainee import Trainee
from models.trainer import Trainer

logger = logging.getLogger(__name__)

T = TypeVar("T")


def init_db() -> None:
    """
    Prepares the flat-file store.
    Seeds the admin credentials file with the default admin if it does not exist.
    """
    if not config.ADMIN_FILE:
        logger.error("Data paths are not initialised; call init_paths() first.")
        return

    admin_file = Path(config.ADMIN_FILE)
    if not admin_file.exists():
        admin_file.parent.mkdir(parents=True, exist_ok=True)
        username, password = config.DEFAULT_ADMIN
        admin_file.write_text(codec.encode_admin(username, password) + "\n", encoding="utf-8")
        logger.info("Seeded admin file %s with default account '%s'", admin_file, username)


# --- GENERIC LOAD / SAVE ---

def _decode_line(raw: bytes) -> str:
    """Decodes one stored line; undecodable bytes make the line corrupt."""
    try:
        return raw.decode("utf-8").rstrip("\r\n")
    except UnicodeDecodeError as e:
        raise CorruptRecordError(raw.decode("utf-8", errors="replace").rstrip("\r\n"), f"not valid UTF-8 ({e.reason})")


def _load(path: Path, decode: Callable[[str], T]) -> List[T]:
    """
    Reads every non-blank line of `path` and decodes it.
    Corrupt lines are logged and skipped; a missing file is an empty collection.
    """
    if path is None or not Path(path).exists():
        return []

    records = []
    with open(path, "rb") as f:
        for lineno, raw in enumerate(f, start=1):
            try:
                line = _decode_line(raw)
                if not line.strip():
                    continue
                records.append(decode(line))
            except CorruptRecordError as e:
                logger.warning("%s:%d skipped. %s", Path(path).name, lineno, e)
    return records


def _save(path: Path, records: List[T], encode: Callable[[T], str]) -> None:
    """
    Truncates `path` and writes one line per record.
    Not atomic: an interrupted write can leave a partial file.
    """
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for record in records:
            f.write(encode(record) + "\n")


# --- TRAINERS ---

def load_trainers() -> List[Trainer]:
    return _load(config.TRAINER_FILE, codec.decode_trainer)


def save_trainers(trainers: List[Trainer]) -> None:
    _save(config.TRAINER_FILE, trainers, codec.encode_trainer)


# --- TRAINEES ---

def load_trainees() -> List[Trainee]:
    return _load(config.TRAINEE_FILE, codec.decode_trainee)


def save_trainees(trainees: List[Trainee]) -> None:
    _save(config.TRAINEE_FILE, trainees, codec.encode_trainee)


# --- CLASSES ---

def load_classes() -> List[GymClass]:
    return _load(config.CLASS_FILE, codec.decode_class)


def save_classes(classes: List[GymClass]) -> None:
    _save(config.CLASS_FILE, classes, codec.encode_class)


# --- ADMINS ---

def load_admins() -> List[Tuple[str, str]]:
    """
    Returns:
        List[Tuple[str, str]]: (username, password) pairs.
    """
    return _load(config.ADMIN_FILE, codec.decode_admin)
