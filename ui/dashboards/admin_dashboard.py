import logging
from pathlib import Path

import config
from core.errors import GymError
from models.session import Session
from services import class_service, member_service, trainer_service
from services.pdf_service import export_schedule_pdf
from ui import display
from ui.prompts import (
    get_contact_number, get_hidden_password, get_non_empty_string, get_numeric_input, get_valid_schedule,
)

logger = logging.getLogger(__name__)


class AdminDashboard:
    """
    Admin menu: manages trainers, classes and trainees.
    """
    OPTIONS = [
        "Add Trainer",
        "Add Class",
        "Display Weekly Schedule",
        "Display Today's Schedule",
        "Search Trainee by ID",
        "Search Trainer by ID",
        "Delete Trainee",
        "Delete Trainer",
        "Delete Class",
        "Display All Trainees",
        "Display All Trainers",
        "View Trainee Payments",
        "Export Weekly Schedule (PDF)",
        "Logout",
    ]

    def __init__(self, session: Session):
        self.session = session
        self.actions = [
            self.add_trainer,
            self.add_class,
            self.weekly_schedule,
            self.daily_schedule,
            self.search_trainee,
            self.search_trainer,
            self.delete_trainee,
            self.delete_trainer,
            self.delete_class,
            self.list_trainees,
            self.list_trainers,
            self.payments,
            self.export_schedule,
        ]

    def run(self) -> None:
        """Shows the menu until the admin logs out."""
        last = len(self.OPTIONS)
        while True:
            display.menu("ADMIN MENU", self.OPTIONS)
            choice = get_numeric_input(f"Enter choice (1-{last}): ", int, 1, last)
            if choice == last:
                logger.info("Admin '%s' logged out", self.session.display_name)
                return
            try:
                self.actions[choice - 1]()
            except GymError as e:
                print(str(e))
            except ValueError as e:
                print(f"Error: {e}")

    # --- CREATE ---

    def add_trainer(self) -> None:
        display.banner("ADD TRAINER")
        while True:
            tid = get_numeric_input("Enter Trainer ID: ", int)
            if not trainer_service.trainer_exists(tid):
                break
            print("Error: ID already exists. Please try a different ID.")
        name = get_non_empty_string("Enter Name: ")
        specialization = get_non_empty_string("Enter Specialization: ")
        contact = get_contact_number("Enter Contact (10 digits): ")
        password = get_hidden_password("Enter Password: ")

        trainer_service.add_trainer(tid, name, specialization, contact, password)
        print("Trainer added successfully!")

    def add_class(self) -> None:
        display.banner("ADD CLASS")
        name = get_non_empty_string("Enter Class Name (e.g., 'Leg Day', 'Yoga', 'HIIT'): ")
        schedule = get_valid_schedule("Enter Schedule (Format: Day-HH:MM, e.g., 'Mon-10:00'): ")
        trainer_name = get_non_empty_string("Enter Trainer Name (must exist): ")
        capacity = get_numeric_input("Enter Capacity: ", int, class_service.MIN_CAPACITY, class_service.MAX_CAPACITY)

        class_service.add_class(name, schedule, trainer_name, capacity)
        print("Class added successfully!")

    # --- SCHEDULES ---

    def weekly_schedule(self) -> None:
        display.show_weekly(class_service.weekly_schedule())

    def daily_schedule(self) -> None:
        display.show_daily(*class_service.daily_schedule())

    # --- SEARCH ---

    def search_trainee(self) -> None:
        tid = get_numeric_input("Enter Trainee ID to search: ", int)
        t = member_service.find_trainee(tid)
        print(display.trainee_row(t) if t else "Trainee not found!")

    def search_trainer(self) -> None:
        tid = get_numeric_input("Enter Trainer ID to search: ", int)
        t = trainer_service.find_trainer(tid)
        if not t:
            print("Trainer not found!")
            return
        display.banner("TRAINER DETAILS")
        print(f"ID: {t.id}")
        print(f"Name: {t.name}")
        print(f"Specialization: {t.specialization}")
        print(f"Contact: {t.contact}")

    # --- DELETE ---

    def delete_trainee(self) -> None:
        tid = get_numeric_input("Enter Trainee ID to delete: ", int)
        member_service.delete_trainee(tid)
        print("Trainee deleted successfully!")

    def delete_trainer(self) -> None:
        tid = get_numeric_input("Enter Trainer ID to delete: ", int)
        removed = trainer_service.delete_trainer(tid)
        if removed:
            print("Trainer and associated classes deleted successfully!")
        else:
            print("Trainer deleted successfully! (No associated classes found)")

    def delete_class(self) -> None:
        name = get_non_empty_string("Enter Class Name to delete: ")
        class_service.delete_class(name)
        print(f"Class '{name}' deleted successfully!")

    # --- LISTINGS ---

    def list_trainees(self) -> None:
        display.banner("TRAINEES LIST")
        trainees = member_service.list_trainees()
        if not trainees:
            print("No trainees enrolled.")
        for t in trainees:
            print(display.trainee_row(t))

    def list_trainers(self) -> None:
        display.banner("TRAINERS LIST")
        trainers = trainer_service.list_trainers()
        if not trainers:
            print("No trainers registered.")
        for t in trainers:
            print(display.trainer_row(t))

    def payments(self) -> None:
        display.banner("TRAINEE PAYMENT STATUS")
        rows = member_service.payment_report()
        if not rows:
            print("No trainees registered.")
        for r in rows:
            print(f"ID: {r['id']}, Name: {r['name']}, Package: {r['package']} ({r['duration']} months), "
                  f"Status: {r['status']}")

    def export_schedule(self) -> None:
        path = export_schedule_pdf(Path(config.DATA_FOLDER) / "weekly_schedule.pdf")
        print(f"Schedule exported to {path}")
