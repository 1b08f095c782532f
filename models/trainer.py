from dataclasses import dataclass


@dataclass
class Trainer:
    """
    Represents a trainer who teaches one or more classes.
    Classes refer to a trainer by name, not by id.
    """
    id: int
    name: str
    specialization: str
    contact: str   # 10 digits
    password: str  # plaintext or bcrypt hash
