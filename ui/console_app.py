import logging

import config
from core.database import init_db
from core.errors import GymError, InvalidCredentialsError
from models.session import Session
from services import auth_service, member_service
from services.file_manager import load_or_setup_paths
from ui import display
from ui.dashboards.admin_dashboard import AdminDashboard
from ui.dashboards.trainee_dashboard import TraineeDashboard
from ui.dashboards.trainer_dashboard import TrainerDashboard
from ui.prompts import (
    confirm_action, get_contact_number, get_hidden_password, get_non_empty_string, get_numeric_input,
)

logger = logging.getLogger(__name__)


class GymConsoleApp:
    """
    Manages the console lifecycle.
    1. Sets up data paths and seeds the admin file.
    2. Asks for a role.
    3. Handles login (or trainee registration).
    4. Runs the matching dashboard until logout.
    """
    def start(self) -> int:
        """Runs the app; returns the process exit code."""
        if config.ADMIN_FILE is None:
            load_or_setup_paths()
        init_db()

        display.banner(f"WELCOME TO THE {config.APP_TITLE}")
        try:
            self.role_loop()
        except EOFError:
            print("\n\nOperation cancelled by user (EOF detected). Exiting.")
            logger.info("Input closed; exiting")
            return 0
        except KeyboardInterrupt:
            print("\n\nInterrupted. Exiting.")
            return 0

        print("\nExiting Gym Management System. Goodbye!")
        return 0

    def role_loop(self) -> None:
        while True:
            print("\n" + "-" * 78)
            print("| Are you an ADMIN, TRAINER, or TRAINEE? (Enter 'exit' to quit)".ljust(77) + "|")
            print("-" * 78)
            role = get_non_empty_string("Enter your role: ").lower()

            if role == "exit":
                return
            if role == "admin":
                self.admin_flow()
            elif role == "trainer":
                self.trainer_flow()
            elif role == "trainee":
                self.trainee_flow()
            else:
                print("Invalid input! Please enter 'admin', 'trainer' or 'trainee'.")

    # --- ROLE FLOWS ---

    def admin_flow(self) -> None:
        display.banner("ADMIN LOGIN")
        username = get_non_empty_string("Username: ")
        password = get_hidden_password("Password: ")
        try:
            user = auth_service.admin_login(username, password)
        except InvalidCredentialsError as e:
            print(str(e))
            return
        print("Admin login successful!")
        AdminDashboard(Session("admin", user)).run()

    def trainer_flow(self) -> None:
        display.banner("TRAINER LOGIN")
        tid = get_numeric_input("Trainer ID: ", int)
        password = get_hidden_password("Password: ")
        try:
            trainer = auth_service.trainer_login(tid, password)
        except InvalidCredentialsError as e:
            print(str(e))
            return
        print("Trainer login successful!")
        TrainerDashboard(Session("trainer", trainer)).run()

    def trainee_flow(self) -> None:
        display.menu("TRAINEE / USER MENU", ["Register", "Login"])
        choice = get_numeric_input("Enter choice (1-2): ", int, 1, 2)
        if choice == 1:
            self.register()
            return

        display.banner("TRAINEE LOGIN")
        tid = get_numeric_input("Trainee ID: ", int)
        password = get_hidden_password("Password: ")
        try:
            trainee = auth_service.trainee_login(tid, password)
        except InvalidCredentialsError as e:
            print(str(e))
            return
        print("Login successful!")
        TraineeDashboard(Session("trainee", trainee)).run()

    def register(self) -> None:
        display.banner("REGISTER TRAINEE")
        while True:
            tid = get_numeric_input("Enter new Trainee ID: ", int)
            if not member_service.trainee_exists(tid):
                break
            print("Error: ID already exists. Please try a different ID.")

        name = get_non_empty_string("Enter Name: ")
        contact = get_contact_number("Enter Contact (10 digits): ")

        print("--- Membership Packages ---")
        print("1. Basic (Access to gym floor)")
        print("2. Premium (Access to gym floor + all classes)")
        package = config.PACKAGES[get_numeric_input("Choose package (1-2): ", int, 1, 2) - 1]

        print("--- Membership Duration ---")
        print("1. 3 Months")
        print("2. 6 Months")
        duration = config.DURATIONS[get_numeric_input("Choose duration (1-2): ", int, 1, 2) - 1]

        password = get_hidden_password("Create Password: ")

        def confirm(cost: int) -> bool:
            print(f"Total cost for {package} membership for {duration} months is ${cost}.")
            return confirm_action("Confirm registration? (y/n): ")

        try:
            trainee = member_service.register_trainee(tid, name, contact, package, duration, password, confirm)
        except GymError as e:
            print(str(e))
            return

        if trainee is None:
            print("Registration cancelled.")
        else:
            print("Trainee registered and payment confirmed successfully!")
