"""Domain objects for the meal reservation desk."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

RED = "\033[1;31m"
BLUE = "\033[1;34m"
GREEN = "\033[1;32m"
MAGENTA = "\033[1;35m"
DEFAULT = "\033[0m"


def _format_number(value: float) -> str:
    """Render a number the way a default stream does: six significant digits."""
    return f"{value:g}"


class MealType(enum.Enum):
    VEG = "veg"
    NON_VEG = "non_veg"
    VEGAN = "vegan"

    @property
    def label(self) -> str:
        """Coloured label shown in meal descriptions (vegan has none)."""
        if self is MealType.VEG:
            return f"{GREEN}Veg{DEFAULT}"
        if self is MealType.NON_VEG:
            return f"{RED}Non-Veg{DEFAULT}"
        return ""


class ReservationStatus(enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        """Label shown in reservation descriptions."""
        if self is ReservationStatus.CONFIRMED:
            return f"{GREEN}Confirmed{DEFAULT}"
        if self is ReservationStatus.CANCELLED:
            return f"{RED}Cancelled{DEFAULT}"
        return "Pending"


@dataclass
class Student:
    user_id: int = 0
    student_id: str = ""
    name: str = ""
    email: str = ""
    balance: float = 0.0
    is_active: bool = False

    def describe(self) -> str:
        """Multi-line description of the student."""
        return "\n".join(
            [
                f"User ID: {self.user_id}",
                f"Student ID: {self.student_id}",
                f"Name: {self.name}",
                f"Email: {self.email}",
                f"Balance: {_format_number(self.balance)}",
                f"Active Status: {'Active' if self.is_active else 'Inactive'}",
            ]
        )


@dataclass
class Meal:
    meal_id: int = 0
    name: str = ""
    price: float = 0.0
    type: MealType = MealType.VEG
    side_items: list[str] = field(default_factory=list)

    def add_side_item(self, item: str) -> None:
        """Append a side item to the meal."""
        self.side_items.append(item)

    def update_price(self, price: float) -> None:
        """Replace the meal's price."""
        self.price = price

    def describe(self) -> str:
        """Multi-line description of the meal."""
        sides = "".join(f"{item} " for item in self.side_items)
        return "\n".join(
            [
                f"Meal ID: {self.meal_id}",
                f"Name: {self.name}",
                f"Price: {_format_number(self.price)}",
                f"Meal Type: {self.type.label}",
                f"Side Items: {sides}",
            ]
        )


@dataclass
class DiningHall:
    hall_id: int = 0
    name: str = " "
    address: str = " "
    capacity: int = 0

    def describe(self) -> str:
        """Multi-line description of the hall."""
        return "\n".join(
            [
                f"hall id  is {self.hall_id}",
                f"name is {self.name}",
                f"address is {self.address}",
                f"capacity is {self.capacity}",
            ]
        )


@dataclass
class Reservation:
    reservation_id: int = 0
    student: Student = field(default_factory=Student)
    hall: DiningHall = field(default_factory=DiningHall)
    meal: Meal = field(default_factory=Meal)
    status: ReservationStatus = ReservationStatus.PENDING

    def describe(self) -> str:
        """Full description: the reservation header, then student, hall and meal."""
        return "\n".join(
            [
                f"Reservation ID: {self.reservation_id}",
                f"Reservation Status: {self.status.label}",
                self.student.describe(),
                self.hall.describe(),
                self.meal.describe(),
            ]
        )

    def cancel(self) -> bool:
        """Mark the reservation as cancelled."""
        self.status = ReservationStatus.CANCELLED
        return True