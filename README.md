# mealdesk

A small interactive terminal program for reserving one meal a day. You pick a
dish from the menu and a dining hall to eat in, and the price is taken from
your balance. You can also cancel the reservation to get a refund.

## Installing

```
pip install .
```

## Using it

Start the desk with:

```
mealdesk
```

To change the pause between printed menu lines, use `--delay`. It takes
seconds, defaults to 0.1, and must not be negative:

```
mealdesk --delay 0
```

You will see a coloured menu:

```
1. 1. Reserve Meal
2. 2. Cancel Reservation
3. 3. Exit
```

Type a number and press Enter. Any other input prints
`Invalid option. Please try again.` and shows the menu again.

- **Reserve Meal** first lists the dishes with their prices:

  | Dish          | Price |
  |---------------|-------|
  | Chelow Kabab  | 15    |
  | Fesenjan      | 10    |
  | Ghormeh Sabzi | 12    |
  | Gheymeh       | 12    |
  | Dolmeh        | 10    |

  Next it checks two things. Your balance must cover the price, and you must
  not already hold a meal for today. If both hold, it lists the halls: Shokat
  (capacity 200) and Golestan (capacity 150). After you choose a hall, the
  price is charged and the full reservation is printed. Your starting balance
  is 30.
- **Cancel Reservation** marks the reservation as cancelled. It adds the price
  of the first dish on the menu (15) back to your balance, whichever dish you
  reserved, and prints the new balance.
- **Exit** closes the program. The program also ends when the input runs out.

## Using it from Python

The same logic is available as a library:

```python
from mealdesk.cafeteria import default_cafeteria, InsufficientBalanceError

desk = default_cafeteria()
reservation = desk.reserve(1, 2)   # Chelow Kabab at Golestan
print(reservation.describe())
desk.cancel()                      # returns the new balance
```

`Cafeteria.meal_menu()` and `Cafeteria.hall_menu()` return the numbered menu
lines. `Cafeteria.reserve(meal_choice, hall_choice)` takes 1-based choices. It
raises `InvalidChoiceError`, `InsufficientBalanceError` or
`AlreadyReservedError`, all of which are subclasses of `ReservationError`.
`hall_choice` may also be a callable. It is called only after the meal, the
balance and the existing reservation have been checked.

The data classes `Student`, `Meal`, `DiningHall` and `Reservation` are in
`mealdesk.models`, along with the enums `MealType` and `ReservationStatus`.
Each data class has a `describe()` method that returns its printed form.

To drive the interactive loop with your own streams, call
`mealdesk.cli.run(cafeteria, infile, outfile, delay)`.

## What it does not do

The desk serves a single student and keeps everything in memory. Nothing is
saved between runs. There is no way to add meals or halls, change prices, or
manage more than one reservation from the terminal.

## Running the tests

```
pip install ".[test]"
pytest
```