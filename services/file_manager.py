import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

import config


def ensure_folder(p: Path) -> None:
    """Creates the folder if it does not exist."""
    p.mkdir(parents=True, exist_ok=True)


def init_paths(base_path: Path) -> None:
    """
    Initialize all global paths based on the selected base path.
    Sets up the four record files and the log file.
    """
    base_path = Path(base_path)
    ensure_folder(base_path)

    config.DATA_FOLDER = base_path
    config.TRAINEE_FILE = base_path / "trainees.txt"
    config.TRAINER_FILE = base_path / "trainers.txt"
    config.CLASS_FILE = base_path / "classes.txt"
    config.ADMIN_FILE = base_path / "admins.txt"
    config.LOG_FILE = base_path / "gym.log"


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def load_or_setup_paths(base_path: Optional[Path] = None) -> None:
    """
    Loads settings from the environment (and a local .env file, if any).

    GYM_DATA_DIR selects the data folder; it defaults to the working directory.
    GYM_HASH_PASSWORDS=1 stores new passwords as bcrypt hashes.
    """
    load_dotenv(find_dotenv(usecwd=True))

    if base_path is None:
        env_dir = os.getenv("GYM_DATA_DIR")
        base_path = Path(env_dir).expanduser() if env_dir else Path.cwd()

    config.HASH_PASSWORDS = _env_flag("GYM_HASH_PASSWORDS")
    init_paths(base_path)
