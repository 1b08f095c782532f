import logging

from core.errors import GymError
from models.session import Session
from services import trainer_service
from ui import display
from ui.prompts import get_contact_number, get_hidden_password, get_non_empty_string, get_numeric_input

logger = logging.getLogger(__name__)


class TrainerDashboard:
    """
    Trainer menu: profile, taught classes and their rosters.
    """
    OPTIONS = [
        "View Profile",
        "View Your Classes",
        "View Your Trainees",
        "Update Profile",
        "Logout",
    ]

    def __init__(self, session: Session):
        self.session = session
        self.actions = [
            self.show_profile,
            self.show_classes,
            self.show_trainees,
            self.update_profile,
        ]

    @property
    def trainer(self):
        return self.session.user

    def run(self) -> None:
        """Shows the menu until the trainer logs out."""
        last = len(self.OPTIONS)
        while True:
            display.menu(f"TRAINER MENU ({self.trainer.name})", self.OPTIONS)
            choice = get_numeric_input(f"Enter choice (1-{last}): ", int, 1, last)
            if choice == last:
                logger.info("Trainer %d logged out", self.trainer.id)
                return
            try:
                self.actions[choice - 1]()
            except GymError as e:
                print(str(e))
            except ValueError as e:
                print(f"Error: {e}")

    def show_profile(self) -> None:
        t = self.trainer
        print(f"\nTrainer Profile:\nName: {t.name}\nSpecialization: {t.specialization}\nContact: {t.contact}")

    def show_classes(self) -> None:
        display.banner(f"CLASSES TAUGHT BY {self.trainer.name}")
        classes = trainer_service.classes_for_trainer(self.trainer.name)
        if not classes:
            print("No classes assigned.")
        for c in classes:
            print(f"Class: {c.class_name}, Schedule: {c.schedule}, Capacity: {c.capacity}, Enrolled: {c.enrolled}")

    def show_trainees(self) -> None:
        display.banner(f"TRAINEES IN CLASSES TAUGHT BY {self.trainer.name}")
        roster = trainer_service.trainees_for_trainer(self.trainer.name)
        if not roster:
            print("No classes assigned, thus no trainees.")
        for gym_class, trainees in roster:
            print(f"Class: {gym_class.class_name}")
            if not trainees:
                print("  No trainees enrolled.")
            for t in trainees:
                print(f"  ID: {t.id}, Name: {t.name}")

    def update_profile(self) -> None:
        display.banner("UPDATE TRAINER PROFILE")
        name = get_non_empty_string("Enter new name: ")
        specialization = get_non_empty_string("Enter new specialization: ")
        contact = get_contact_number("Enter new contact (10 digits): ")
        password = get_hidden_password("Enter new password: ")

        self.session.user = trainer_service.update_trainer_profile(self.trainer.id, name, specialization, contact, password)
        print("Profile updated successfully!")
