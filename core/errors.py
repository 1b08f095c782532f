"""
Error taxonomy for the gym system.
Every error is recoverable: menus print the message and return to the loop.
"""


class GymError(Exception):
    """Base class for all gym domain errors."""
    pass


class DuplicateIDError(GymError):
    """Raised when creating a trainer or trainee with an existing ID."""
    pass


class InvalidCredentialsError(GymError):
    """Raised when a login does not match any stored account."""

    def __init__(self, message: str = "Invalid credentials!"):
        super().__init__(message)


class NotFoundError(GymError):
    """Raised when a trainee, trainer or class does not exist."""
    pass


class ClassNotFoundError(NotFoundError):
    pass


class UnknownTrainerError(GymError):
    """Raised when a class names a trainer that is not registered."""
    pass


class ClassFullError(GymError):
    pass


class AlreadyEnrolledError(GymError):
    pass


class NotPremiumError(GymError):
    """Raised when a Basic member tries to sign up for a class."""

    def __init__(self, message: str = "Class sign-up is a Premium feature. Please upgrade your membership."):
        super().__init__(message)


class CorruptRecordError(GymError):
    """Raised by the codec when a stored line can not be parsed."""

    def __init__(self, line: str, reason: str):
        super().__init__(f"Corrupt record ({reason}): {line!r}")
        self.line = line
        self.reason = reason
