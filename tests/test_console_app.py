"""End-to-end runs of the console app with scripted input"""

import io
import unittest
from unittest.mock import patch

import config
from core import database
from services import class_service, member_service, trainer_service
from ui.console_app import GymConsoleApp

from base import TempDataTestCase


class TestConsoleApp(TempDataTestCase):

    def run_app(self, inputs, passwords=()):
        with patch('builtins.input', side_effect=list(inputs) + [EOFError]), \
                patch('getpass.getpass', side_effect=list(passwords)), \
                patch('sys.stdout', new_callable=io.StringIO) as out:
            code = GymConsoleApp().start()
        return code, out.getvalue()

    def test_exit(self):
        code, out = self.run_app(["exit"])
        self.assertEqual(code, 0)
        self.assertIn("Goodbye", out)

    def test_end_of_input_exits_cleanly(self):
        code, out = self.run_app([])
        self.assertEqual(code, 0)
        self.assertIn("EOF detected", out)

    def test_admin_adds_trainer(self):
        code, out = self.run_app(
            ["ADMIN", "admin", "1", "7", "Alex", "Yoga", "0123456789", "14", "exit"],
            passwords=["admin123", "coachpw"],
        )
        self.assertEqual(code, 0)
        self.assertIn("Trainer added successfully!", out)
        self.assertEqual(database.load_trainers()[0].name, "Alex")

    def test_bad_admin_password(self):
        code, out = self.run_app(["admin", "admin", "exit"], passwords=["nope"])
        self.assertIn("Invalid credentials!", out)

    def test_trainee_registers_then_signs_up(self):
        trainer_service.add_trainer(1, "Alex", "Yoga", "0123456789", "pw")
        class_service.add_class("Yoga", "Mon-10:00", "Alex", 5)

        code, out = self.run_app(
            [
                "trainee", "1", "3", "Sam", "5551234567", "2", "1", "y",   # register Premium/3
                "trainee", "2", "3",                                        # login
                "6", "Yoga",                                                # sign up
                "6", "Yoga",                                                # again
                "7", "exit",
            ],
            passwords=["sampw", "sampw"],
        )
        self.assertIn("is $150.", out)
        self.assertIn("Sam signed up successfully for Yoga!", out)
        self.assertIn("You are already enrolled in this class.", out)
        self.assertEqual(database.load_classes()[0].enrolled_trainee_ids, [3])
        self.assertEqual(member_service.find_trainee(3).membership_package, "Premium")

    def test_cancelled_registration(self):
        code, out = self.run_app(
            ["trainee", "1", "3", "Sam", "5551234567", "1", "2", "n", "exit"],
            passwords=["sampw"],
        )
        self.assertIn("is $180.", out)
        self.assertIn("Registration cancelled.", out)
        self.assertEqual(database.load_trainees(), [])

    def test_trainee_bmi_from_menu(self):
        self.run_app(["trainee", "1", "3", "Sam", "5551234567", "1", "1", "y", "exit"], passwords=["sampw"])

        code, out = self.run_app(["trainee", "2", "3", "5", "1.8", "81", "7", "exit"], passwords=["sampw"])
        self.assertEqual(code, 0)
        self.assertIn("Your BMI is: 25.00", out)
        self.assertIn("Overweight", out)
        self.assertEqual(member_service.find_trainee(3).weight_kg, 81.0)

    def test_trainer_views_roster(self):
        trainer_service.add_trainer(1, "Alex", "Yoga", "0123456789", "pw")
        class_service.add_class("Yoga", "Mon-10:00", "Alex", 5)

        code, out = self.run_app(["trainer", "1", "2", "3", "5", "exit"], passwords=["pw"])
        self.assertEqual(code, 0)
        self.assertIn("Class: Yoga, Schedule: Mon-10:00, Capacity: 5, Enrolled: 0", out)
        self.assertIn("  No trainees enrolled.", out)

    def test_login_survives_undecodable_trainee_line(self):
        config.TRAINEE_FILE.write_bytes(
            b"2,Jos\xe9,5559876543,pw,Premium,6,Paid,0.000000,0.000000\n"
            b"3,Kim,5550001111,kimpw,Basic,6,Paid,0.000000,0.000000\n"
        )
        with self.assertLogs("core.database", level="WARNING"):
            code, out = self.run_app(["trainee", "2", "3", "1", "7", "exit"], passwords=["kimpw"])
        self.assertEqual(code, 0)
        self.assertIn("Name: Kim", out)


if __name__ == '__main__':
    unittest.main()
