"""Tests for trainee registration, updates and deletion"""

import unittest

import config
from core import database
from core.errors import DuplicateIDError, NotFoundError
from models.gym_class import GymClass
from services import member_service

from base import TempDataTestCase


class TestCost(unittest.TestCase):

    def test_price_table(self):
        self.assertEqual(member_service.get_cost("Basic", 3), 100)
        self.assertEqual(member_service.get_cost("Basic", 6), 180)
        self.assertEqual(member_service.get_cost("Premium", 3), 150)
        self.assertEqual(member_service.get_cost("Premium", 6), 270)

    def test_unknown_combination(self):
        with self.assertRaises(ValueError):
            member_service.get_cost("Gold", 3)
        with self.assertRaises(ValueError):
            member_service.get_cost("Basic", 12)


class TestRegistration(TempDataTestCase):

    def test_register_trainee(self):
        t = member_service.register_trainee(1, "Sam", "5551234567", "Premium", 6, "pw", self.always_confirm)
        self.assertEqual(t.payment_status, "Paid")
        self.assertEqual(t.height_m, 0)
        self.assertEqual(database.load_trainees(), [t])

    def test_confirm_receives_cost(self):
        seen = []
        member_service.register_trainee(1, "Sam", "5551234567", "Premium", 3, "pw",
                                        lambda cost: seen.append(cost) or True)
        self.assertEqual(seen, [150])

    def test_cancelled_registration_saves_nothing(self):
        result = member_service.register_trainee(1, "Sam", "5551234567", "Basic", 3, "pw", lambda cost: False)
        self.assertIsNone(result)
        self.assertEqual(database.load_trainees(), [])
        self.assertFalse(config.TRAINEE_FILE.exists())

    def test_duplicate_id(self):
        member_service.register_trainee(1, "Sam", "5551234567", "Basic", 3, "pw", self.always_confirm)
        before = config.TRAINEE_FILE.read_text(encoding="utf-8")

        asked = []
        with self.assertRaises(DuplicateIDError):
            member_service.register_trainee(1, "Other", "5550000000", "Premium", 6, "pw2",
                                            lambda cost: asked.append(cost) or True)
        self.assertEqual(asked, [])
        self.assertEqual(config.TRAINEE_FILE.read_text(encoding="utf-8"), before)

    def test_invalid_contact(self):
        with self.assertRaises(ValueError):
            member_service.register_trainee(1, "Sam", "555-123", "Basic", 3, "pw", self.always_confirm)

    def test_lookup_helpers(self):
        member_service.register_trainee(4, "Sam", "5551234567", "Basic", 3, "pw", self.always_confirm)
        self.assertTrue(member_service.trainee_exists(4))
        self.assertFalse(member_service.trainee_exists(5))
        self.assertEqual(member_service.find_trainee(4).name, "Sam")
        self.assertIsNone(member_service.find_trainee(5))

    def test_payment_report(self):
        member_service.register_trainee(1, "Sam", "5551234567", "Basic", 3, "pw", self.always_confirm)
        member_service.register_trainee(2, "Kim", "5559876543", "Premium", 6, "pw", self.always_confirm)
        report = member_service.payment_report()
        self.assertEqual(report[1], {'id': 2, 'name': 'Kim', 'package': 'Premium', 'duration': 6, 'status': 'Paid'})
        self.assertEqual(len(report), 2)


class TestProfileUpdates(TempDataTestCase):

    def setUp(self):
        super().setUp()
        member_service.register_trainee(1, "Sam", "5551234567", "Premium", 6, "pw", self.always_confirm)

    def test_update_profile_keeps_membership(self):
        member_service.update_trainee_profile(1, "Samuel", "5550001111", "newpw")
        t = member_service.find_trainee(1)
        self.assertEqual((t.name, t.contact, t.password), ("Samuel", "5550001111", "newpw"))
        self.assertEqual((t.membership_package, t.membership_duration_months), ("Premium", 6))

    def test_update_unknown_trainee(self):
        with self.assertRaises(NotFoundError):
            member_service.update_trainee_profile(99, "X", "5550001111", "pw")

    def test_record_body_metrics(self):
        bmi = member_service.record_body_metrics(1, 1.8, 81.0)
        self.assertAlmostEqual(bmi, 25.0, places=2)
        t = member_service.find_trainee(1)
        self.assertAlmostEqual(t.height_m, 1.8)
        self.assertAlmostEqual(t.weight_kg, 81.0)

    def test_body_metrics_out_of_range(self):
        with self.assertRaises(ValueError):
            member_service.record_body_metrics(1, 0.2, 81.0)
        with self.assertRaises(ValueError):
            member_service.record_body_metrics(1, 1.8, 500.0)
        self.assertEqual(member_service.find_trainee(1).height_m, 0)


class TestDeleteTrainee(TempDataTestCase):

    def setUp(self):
        super().setUp()
        for tid in (1, 2):
            member_service.register_trainee(tid, f"T{tid}", "5551234567", "Premium", 3, "pw", self.always_confirm)
        database.save_classes([
            GymClass("Yoga", "Mon-10:00", "Alex", 20, [1, 2]),
            GymClass("HIIT", "Tue-09:00", "Alex", 10, [2]),
            GymClass("Spin", "Wed-07:00", "Bea", 5, [1]),
        ])

    def test_delete_removes_enrollments(self):
        member_service.delete_trainee(1)

        self.assertIsNone(member_service.find_trainee(1))
        classes = {c.class_name: c for c in database.load_classes()}
        self.assertEqual(classes["Yoga"].enrolled_trainee_ids, [2])
        self.assertEqual(classes["Yoga"].enrolled, 1)
        self.assertEqual(classes["HIIT"].enrolled_trainee_ids, [2])
        self.assertEqual(classes["Spin"].enrolled, 0)
        self.assertIn("Spin,Wed-07:00,Bea,5,0,", config.CLASS_FILE.read_text(encoding="utf-8"))

    def test_delete_removes_every_occurrence(self):
        config.CLASS_FILE.write_text("Yoga,Mon-10:00,Alex,20,3,1;1;2\n", encoding="utf-8")
        member_service.delete_trainee(1)
        c = database.load_classes()[0]
        self.assertEqual(c.enrolled_trainee_ids, [2])
        self.assertEqual(c.enrolled, 1)

    def test_delete_unknown_trainee(self):
        with self.assertRaises(NotFoundError):
            member_service.delete_trainee(42)
        self.assertEqual(len(database.load_trainees()), 2)


if __name__ == '__main__':
    unittest.main()
