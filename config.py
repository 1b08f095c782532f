# Global Config
DATA_FOLDER = None
TRAINEE_FILE = None
TRAINER_FILE = None
CLASS_FILE = None
ADMIN_FILE = None
LOG_FILE = None

# Store new passwords as bcrypt hashes instead of plaintext
HASH_PASSWORDS = False

DEFAULT_ADMIN = ("admin", "admin123")

# Membership price table: (package, months) -> cost in dollars
PACKAGE_COSTS = {
    ("Basic", 3): 100,
    ("Basic", 6): 180,
    ("Premium", 3): 150,
    ("Premium", 6): 270,
}

PACKAGES = ["Basic", "Premium"]
DURATIONS = [3, 6]

APP_TITLE = "GYM MANAGEMENT SYSTEM"
