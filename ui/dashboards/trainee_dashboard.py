import logging

from core.errors import GymError
from models.session import Session
from services import class_service, member_service
from services.health_service import bmi_feedback
from ui import display
from ui.prompts import get_contact_number, get_hidden_password, get_non_empty_string, get_numeric_input

logger = logging.getLogger(__name__)


class TraineeDashboard:
    """
    Trainee menu: profile, schedules, BMI and class sign-up.
    """
    OPTIONS = [
        "View Profile",
        "View Today's Schedule",
        "View Weekly Schedule",
        "Update Profile",
        "Calculate BMI",
        "Sign Up for a Class",
        "Logout",
    ]

    def __init__(self, session: Session):
        self.session = session
        self.actions = [
            self.show_profile,
            self.daily_schedule,
            self.weekly_schedule,
            self.update_profile,
            self.calculate_bmi,
            self.sign_up,
        ]

    @property
    def trainee(self):
        return self.session.user

    def run(self) -> None:
        """Shows the menu until the trainee logs out."""
        last = len(self.OPTIONS)
        while True:
            display.menu(f"TRAINEE MENU ({self.trainee.name})", self.OPTIONS)
            choice = get_numeric_input(f"Enter choice (1-{last}): ", int, 1, last)
            if choice == last:
                logger.info("Trainee %d logged out", self.trainee.id)
                return
            try:
                self.actions[choice - 1]()
            except GymError as e:
                print(str(e))
            except ValueError as e:
                print(f"Error: {e}")

    def show_profile(self) -> None:
        t = self.trainee
        print(f"\nProfile:\nName: {t.name}\nContact: {t.contact}"
              f"\nMembership: {t.membership_package} ({t.membership_duration_months} months)"
              f"\nPayment Status: {t.payment_status}")

    def daily_schedule(self) -> None:
        display.show_daily(*class_service.daily_schedule())

    def weekly_schedule(self) -> None:
        display.show_weekly(class_service.weekly_schedule())

    def update_profile(self) -> None:
        display.banner("UPDATE TRAINEE PROFILE")
        name = get_non_empty_string("Enter new name: ")
        contact = get_contact_number("Enter new contact (10 digits): ")
        password = get_hidden_password("Enter new password: ")

        self.session.user = member_service.update_trainee_profile(self.trainee.id, name, contact, password)
        print("Profile updated successfully!")

    def calculate_bmi(self) -> None:
        height = get_numeric_input("Enter height (meters): ", float,
                                   member_service.MIN_HEIGHT_M, member_service.MAX_HEIGHT_M)
        weight = get_numeric_input("Enter weight (kg): ", float,
                                   member_service.MIN_WEIGHT_KG, member_service.MAX_WEIGHT_KG)

        bmi = member_service.record_body_metrics(self.trainee.id, height, weight)
        self.trainee.height_m = height
        self.trainee.weight_kg = weight
        print(f"Your BMI is: {bmi:.2f}")
        print()
        print(bmi_feedback(bmi))

    def sign_up(self) -> None:
        name = get_non_empty_string("Enter the full Class Name to sign up for: ")
        class_service.sign_up_for_class(self.trainee, name)
        print(f"{self.trainee.name} signed up successfully for {name}!")
