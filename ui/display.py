from typing import List, Tuple

from models.gym_class import GymClass
from models.trainee import Trainee
from models.trainer import Trainer

WIDTH = 80


def banner(title: str) -> None:
    print("\n" + "*" * WIDTH)
    print("*" + title.center(WIDTH - 2) + "*")
    print("*" * WIDTH)


def menu(title: str, options: List[str]) -> None:
    print("\n" + f" {title} ".center(62, "-"))
    for i, option in enumerate(options, start=1):
        print(f"{i}. {option}")
    print("-" * 62)


def class_row(c: GymClass) -> str:
    return f"  {c.time}   {c.class_name} ({c.trainer_name})   -   Enrolled: {c.enrolled}/{c.capacity}"


def trainee_row(t: Trainee) -> str:
    return f"ID: {t.id}, Name: {t.name}, Contact: {t.contact}, Membership: {t.membership_package}"


def trainer_row(t: Trainer) -> str:
    return f"ID: {t.id}, Name: {t.name}, Specialization: {t.specialization}, Contact: {t.contact}"


def show_weekly(schedule: List[Tuple[str, List[GymClass]]]) -> None:
    banner("WEEKLY CLASS SCHEDULE")
    if not any(classes for _, classes in schedule):
        print("No classes have been scheduled for the week.")
        return

    for day, classes in schedule:
        print(f"\n--- {day} " + "-" * (WIDTH - 8))
        if not classes:
            print("  No classes scheduled for this day.")
        for c in classes:
            print(class_row(c))


def show_daily(day: str, classes: List[GymClass]) -> None:
    banner(f"CLASSES FOR TODAY ({day})")
    if not classes:
        print("No classes are scheduled for today. Take a rest day!")
    for c in classes:
        print(class_row(c))
