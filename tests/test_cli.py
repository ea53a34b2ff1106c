import io

import pytest

from mealdesk.cafeteria import default_cafeteria
from mealdesk.cli import main, run
from mealdesk.models import ReservationStatus


def _run(script, cafeteria=None):
    cafeteria = cafeteria or default_cafeteria()
    out = io.StringIO()
    code = run(cafeteria, io.StringIO(script), out, 0)
    return code, out.getvalue(), cafeteria


def test_exit_option_prints_message_and_returns_zero():
    code, output, _ = _run("3\n")
    assert code == 0
    assert output.endswith("Exiting program.\n")


def test_main_menu_lines_are_numbered_twice():
    _, output, _ = _run("3\n")
    assert "1. 1. Reserve Meal" in output
    assert "3. 3. Exit" in output


def test_end_of_input_stops_without_exit_message():
    code, output, _ = _run("")
    assert code == 0
    assert "Exiting program." not in output


def test_successful_reservation_charges_student():
    code, output, cafeteria = _run("1\n1\n1\n3\n")
    assert code == 0
    assert "Reservation successful!" in output
    assert cafeteria.student.balance == 30 - cafeteria.meals[0].price
    assert cafeteria.student.is_active
    assert cafeteria.reservation.status is ReservationStatus.CONFIRMED
    assert cafeteria.reservation.hall.name == "Shokat"


def test_reservation_lists_meals_and_halls():
    _, output, _ = _run("1 2 2 3")
    assert "1. Chelow Kabab 15$" in output
    assert "Select a dining hall:" in output
    assert "Shokat (Capacity: 200)" in output
    assert "Golestan" in output


def test_second_reservation_is_refused():
    _, output, cafeteria = _run("1 2 1 1 2 3")
    assert "you have meal for today" in output
    assert output.count("Reservation successful!") == 1
    assert cafeteria.student.balance == 30 - cafeteria.meals[1].price


def test_invalid_meal_choice():
    _, output, cafeteria = _run("1 9 3")
    assert "Invalid meal option. Please try again." in output
    assert "Select a dining hall" not in output
    assert cafeteria.student.balance == 30


def test_invalid_hall_choice_leaves_balance():
    _, output, cafeteria = _run("1 1 7 3")
    assert "Invalid dining hall option. Please try again." in output
    assert cafeteria.student.balance == 30
    assert not cafeteria.student.is_active


def test_insufficient_balance_skips_hall_prompt():
    cafeteria = default_cafeteria()
    cafeteria.student.balance = 5
    _, output, _ = _run("1 1 3", cafeteria)
    assert "Insufficient balance." in output
    assert "the balance is :5" in output
    assert "Select a dining hall" not in output


def test_cancel_refunds_first_meal_price():
    _, output, cafeteria = _run("1 2 1 2 3")
    expected = 30 - cafeteria.meals[1].price + cafeteria.meals[0].price
    assert cafeteria.student.balance == expected
    assert cafeteria.reservation.status is ReservationStatus.CANCELLED
    assert "Cancelling reservation..." in output
    assert "Reservation cancelled." in output


@pytest.mark.parametrize("choice", ["9", "0", "abc"])
def test_invalid_main_option(choice):
    _, output, _ = _run(f"{choice}\n3\n")
    assert "Invalid option. Please try again." in output
    assert output.endswith("Exiting program.\n")


def test_main_runs_on_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main(["--delay", "0"]) == 0
    assert "Exiting program." in capsys.readouterr().out


def test_main_rejects_negative_delay():
    with pytest.raises(SystemExit):
        main(["--delay", "-1"])