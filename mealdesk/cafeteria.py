"""The reservation desk: a student, a menu of meals and a set of dining halls."""

from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import dataclass, field

from mealdesk.models import (
    DiningHall,
    Meal,
    MealType,
    Reservation,
    ReservationStatus,
    Student,
    _format_number,
)


class ReservationError(Exception):
    """Base class for reservations that cannot be made."""


class InvalidChoiceError(ReservationError, ValueError):
    """A menu choice that names no meal or hall."""


class InsufficientBalanceError(ReservationError):
    """The student cannot afford the chosen meal."""

    def __init__(self, balance: float, price: float) -> None:
        super().__init__(f"Insufficient balance. the balance is :{_format_number(balance)}")
        self.balance = balance
        self.price = price


class AlreadyReservedError(ReservationError):
    """The student already holds a meal for today."""

    def __init__(self) -> None:
        super().__init__("you have meal for today")


@dataclass
class Cafeteria:
    student: Student
    meals: list[Meal]
    halls: list[DiningHall]
    reservation: Reservation = field(default_factory=Reservation)

    def meal_menu(self) -> list[str]:
        """Numbered lines listing the meals and their prices."""
        return [
            f"{number}. {meal.name} {_format_number(meal.price)}$"
            for number, meal in enumerate(self.meals, start=1)
        ]

    def hall_menu(self) -> list[str]:
        """Numbered lines listing the halls and their capacities."""
        return [
            f"{number}. {hall.name} (Capacity: {hall.capacity})"
            for number, hall in enumerate(self.halls, start=1)
        ]

    @staticmethod
    def _pick(items: list, choice: int, what: str):
        if isinstance(choice, int) and 1 <= choice <= len(items):
            return items[choice - 1]
        raise InvalidChoiceError(f"Invalid {what} option. Please try again.")

    def reserve(self, meal_choice: int, hall_choice: int | Callable[[], int]) -> Reservation:
        """Reserve a meal in a hall, charging the student.

        ``hall_choice`` may be a callable; it is consulted only once the meal
        choice, the balance and the student's existing reservation check out.
        """
        meal = self._pick(self.meals, meal_choice, "meal")
        if self.student.balance < meal.price:
            raise InsufficientBalanceError(self.student.balance, meal.price)
        if self.student.is_active:
            raise AlreadyReservedError()
        if callable(hall_choice):
            hall_choice = hall_choice()
        hall = self._pick(self.halls, hall_choice, "dining hall")

        self.student.balance -= meal.price
        self.reservation.hall = copy.deepcopy(hall)
        self.reservation.meal = copy.deepcopy(meal)
        self.reservation.student = copy.deepcopy(self.student)
        self.reservation.status = ReservationStatus.CONFIRMED
        self.student.is_active = True
        return self.reservation

    def cancel(self) -> float:
        """Cancel the reservation, refunding the first meal's price; return the new balance."""
        self.student.balance += self.meals[0].price
        self.reservation.cancel()
        return self.student.balance


def default_cafeteria() -> Cafeteria:
    """The desk as it opens: two halls, five meals and a balance of 30."""
    halls = [
        DiningHall(hall_id=6546, name="Shokat", address="Birjand", capacity=200),
        DiningHall(hall_id=6547, name="Golestan", address="amir abad", capacity=150),
    ]
    meals = [
        Meal(meal_id=4566, name="Chelow Kabab", price=15, type=MealType.NON_VEG),
        Meal(meal_id=4567, name="Fesenjan", price=10, type=MealType.NON_VEG),
        Meal(meal_id=4568, name="Ghormeh Sabzi", price=12, type=MealType.NON_VEG),
        Meal(meal_id=4569, name="Gheymeh", price=12, type=MealType.NON_VEG),
        Meal(meal_id=4570, name="Dolmeh", price=10, type=MealType.VEG),
    ]
    return Cafeteria(student=Student(balance=30), meals=meals, halls=halls)