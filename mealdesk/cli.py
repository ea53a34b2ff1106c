"""Interactive console front end for the reservation desk."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterator
from typing import TextIO

from mealdesk.cafeteria import (
    AlreadyReservedError,
    Cafeteria,
    InsufficientBalanceError,
    InvalidChoiceError,
    default_cafeteria,
)
from mealdesk.models import BLUE, DEFAULT, GREEN, RED, _format_number

MAIN_MENU = (
    "1. Reserve Meal",
    "2. Cancel Reservation",
    "3. Exit",
)


class _EndOfInput(Exception):
    """The input ran out before a choice could be read."""


def _tokens(infile: TextIO) -> Iterator[str]:
    for line in infile:
        yield from line.split()


class _Session:
    """One run of the menu loop over a pair of streams."""

    def __init__(self, cafeteria: Cafeteria, infile: TextIO, outfile: TextIO, delay: float) -> None:
        self.cafeteria = cafeteria
        self.tokens = _tokens(infile)
        self.outfile = outfile
        self.delay = delay

    def write(self, text: str) -> None:
        self.outfile.write(text)
        self.outfile.flush()

    def pause(self) -> None:
        if self.delay > 0:
            time.sleep(self.delay)

    def read_choice(self) -> int | None:
        """Next whitespace-separated number, or None when the token is not a number."""
        try:
            token = next(self.tokens)
        except StopIteration:
            raise _EndOfInput from None
        try:
            return int(token)
        except ValueError:
            return None

    def show_main_menu(self) -> None:
        self.write("\n")
        for number, entry in enumerate(MAIN_MENU, start=1):
            self.pause()
            self.write(f"{BLUE}{number}. {entry}{DEFAULT}\n")

    def choose_hall(self) -> int | None:
        self.write(f"{BLUE}Select a dining hall:\n")
        lines = self.cafeteria.hall_menu()
        for position, line in enumerate(lines):
            self.pause()
            if position == len(lines) - 1 and line.endswith(")"):
                line = f"{line[:-1]}{DEFAULT})"
            self.write(f"{line}\n")
        return self.read_choice()

    def reserve(self) -> None:
        self.write("Enter the meal:\n")
        for line in self.cafeteria.meal_menu():
            self.pause()
            self.write(f"{GREEN}{line}{DEFAULT}\n")
        meal_choice = self.read_choice()
        try:
            reservation = self.cafeteria.reserve(meal_choice, self.choose_hall)
        except InvalidChoiceError as error:
            self.write(f"{error}\n")
            return
        except InsufficientBalanceError as error:
            self.pause()
            self.write(f"{RED}Insufficient balance.\n")
            self.write(f"the balance is :{_format_number(error.balance)}")
            return
        except AlreadyReservedError as error:
            self.pause()
            self.write(f"{RED}{error}{DEFAULT}")
            return
        self.write(f"{GREEN}Reservation successful!\n{DEFAULT}")
        self.pause()
        self.write(f"{reservation.describe()}\n")

    def cancel(self) -> None:
        self.write(f"{RED}Cancelling reservation...\n{DEFAULT}")
        balance = self.cafeteria.cancel()
        self.write(f"{GREEN}new balance is :{_format_number(balance)}{DEFAULT}\n")
        self.write("Reservation cancelled.\n")

    def loop(self) -> int:
        try:
            while True:
                self.show_main_menu()
                option = self.read_choice()
                if option == 1:
                    self.reserve()
                elif option == 2:
                    self.cancel()
                elif option == 3:
                    self.write("Exiting program.\n")
                    return 0
                else:
                    self.write("Invalid option. Please try again.\n")
        except _EndOfInput:
            return 0


def run(cafeteria: Cafeteria, infile: TextIO, outfile: TextIO, delay: float = 0.1) -> int:
    """Drive the menu loop until the user exits or the input ends; return the exit status."""
    return _Session(cafeteria, infile, outfile, delay).loop()


def main(argv: list[str] | None = None) -> int:
    """Start the reservation desk on standard input and output."""
    parser = argparse.ArgumentParser(prog="mealdesk", description="Reserve meals in a dining hall.")
    parser.add_argument(
        "--delay",
        type=float,
        default=0.1,
        help="seconds to pause between menu lines (default: 0.1)",
    )
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative")
    return run(default_cafeteria(), sys.stdin, sys.stdout, args.delay)


if __name__ == "__main__":
    sys.exit(main())