from dataclasses import dataclass


@dataclass
class Trainee:
    """
    Represents a single gym member's profile and subscription details.
    """
    id: int
    name: str
    contact: str   # 10 digits
    password: str  # plaintext or bcrypt hash
    membership_package: str  # 'Basic' or 'Premium'
    membership_duration_months: int  # 3 or 6
    payment_status: str = "Paid"  # 'Paid' or 'Due'
    height_m: float = 0.0  # 0 means not recorded
    weight_kg: float = 0.0

    @property
    def is_premium(self) -> bool:
        return self.membership_package == "Premium"
