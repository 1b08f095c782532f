"""Tests for the flat-file store"""

import unittest

import config
from core import database
from core.database import init_db
from models.gym_class import GymClass
from models.trainer import Trainer

from base import TempDataTestCase


class TestFlatFileStore(TempDataTestCase):

    def test_admin_file_seeded(self):
        self.assertEqual(config.ADMIN_FILE.read_text(encoding="utf-8"), "admin,admin123\n")
        self.assertEqual(database.load_admins(), [("admin", "admin123")])

    def test_existing_admin_file_not_overwritten(self):
        config.ADMIN_FILE.write_text("boss,hunter2\n", encoding="utf-8")
        init_db()
        self.assertEqual(database.load_admins(), [("boss", "hunter2")])

    def test_missing_files_load_empty(self):
        self.assertEqual(database.load_trainers(), [])
        self.assertEqual(database.load_trainees(), [])
        self.assertEqual(database.load_classes(), [])

    def test_save_then_load(self):
        trainers = [Trainer(1, "Alex", "Yoga", "0123456789", "pw"), Trainer(2, "Bea", "Spin", "0987654321", "pw2")]
        database.save_trainers(trainers)
        self.assertEqual(database.load_trainers(), trainers)

    def test_save_rewrites_whole_file(self):
        database.save_classes([GymClass("Yoga", "Mon-10:00", "Alex", 20), GymClass("HIIT", "Tue-09:00", "Alex", 10)])
        database.save_classes([GymClass("Spin", "Wed-07:00", "Bea", 5)])
        self.assertEqual(config.CLASS_FILE.read_text(encoding="utf-8"), "Spin,Wed-07:00,Bea,5,0,\n")

    def test_blank_and_corrupt_lines_skipped(self):
        config.TRAINER_FILE.write_text(
            "1,Alex,Yoga,0123456789,pw\n"
            "\n"
            "oops,Bea,Spin,0987654321,pw\n"
            "3,Cy,Boxing,1112223333,pw\n",
            encoding="utf-8",
        )
        with self.assertLogs("core.database", level="WARNING") as logs:
            trainers = database.load_trainers()
        self.assertEqual([t.id for t in trainers], [1, 3])
        self.assertIn("trainers.txt:3", logs.output[0])

    def test_undecodable_line_skipped(self):
        config.TRAINEE_FILE.write_bytes(
            b"1,Sam,5551234567,pw,Basic,3,Paid,0.000000,0.000000\n"
            b"2,Jos\xe9,5559876543,pw,Premium,6,Paid,0.000000,0.000000\n"
            b"3,Kim,5550001111,pw,Basic,6,Paid,0.000000,0.000000\n"
        )
        with self.assertLogs("core.database", level="WARNING") as logs:
            trainees = database.load_trainees()
        self.assertEqual([t.id for t in trainees], [1, 3])
        self.assertIn("trainees.txt:2", logs.output[0])
        self.assertIn("UTF-8", logs.output[0])


if __name__ == '__main__':
    unittest.main()
