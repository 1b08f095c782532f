import logging

import bcrypt

import config
from core import database
from core.errors import InvalidCredentialsError
from models.trainee import Trainee
from models.trainer import Trainer

logger = logging.getLogger(__name__)

BCRYPT_PREFIX = "$2"


def hash_password(password: str) -> str:
    """
    Prepares a password for storage.
    Returns a bcrypt hash when config.HASH_PASSWORDS is on, else the plaintext.
    """
    if not config.HASH_PASSWORDS:
        return password
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')


def check_password(password: str, stored: str) -> bool:
    """
    Compares an input password with a stored one.
    Stored values that look like bcrypt hashes are verified with bcrypt,
    anything else is compared as plaintext.
    """
    if stored.startswith(BCRYPT_PREFIX):
        try:
            return bcrypt.checkpw(password.encode('utf-8'), stored.encode('utf-8'))
        except ValueError:
            # Not a real hash after all (plaintext that happens to start with "$2")
            return password == stored
    return password == stored


def admin_login(username: str, password: str) -> str:
    """
    Verifies admin credentials against the admin file.

    Returns:
        str: The username on success.

    Raises:
        InvalidCredentialsError: If no admin matches.
    """
    for stored_user, stored_pass in database.load_admins():
        if stored_user == username and check_password(password, stored_pass):
            logger.info("Admin '%s' logged in", username)
            return username
    logger.info("Failed admin login for '%s'", username)
    raise InvalidCredentialsError()


def trainer_login(trainer_id: int, password: str) -> Trainer:
    """
    Verifies trainer credentials (id + password).

    Raises:
        InvalidCredentialsError: If no trainer matches.
    """
    for t in database.load_trainers():
        if t.id == trainer_id and check_password(password, t.password):
            logger.info("Trainer %d logged in", trainer_id)
            return t
    logger.info("Failed trainer login for id %d", trainer_id)
    raise InvalidCredentialsError()


def trainee_login(trainee_id: int, password: str) -> Trainee:
    """
    Verifies trainee credentials (id + password).

    Raises:
        InvalidCredentialsError: If no trainee matches.
    """
    for t in database.load_trainees():
        if t.id == trainee_id and check_password(password, t.password):
            logger.info("Trainee %d logged in", trainee_id)
            return t
    logger.info("Failed trainee login for id %d", trainee_id)
    raise InvalidCredentialsError()
