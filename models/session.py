from dataclasses import dataclass
from typing import Optional, Union

from models.trainee import Trainee
from models.trainer import Trainer


@dataclass
class Session:
    """
    The logged-in user for one pass through a role menu.
    `user` is the admin username, or the Trainer/Trainee record.
    """
    role: str  # 'admin', 'trainer' or 'trainee'
    user: Optional[Union[str, Trainer, Trainee]] = None

    @property
    def display_name(self) -> str:
        if isinstance(self.user, str):
            return self.user
        if self.user is None:
            return "Unknown"
        return self.user.name
