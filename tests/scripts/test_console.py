"""Tests for the interactive text console."""

import logging
from collections.abc import Iterator
from datetime import datetime, timedelta

import pytest

from cineplan.scripts.console import CinemaConsole
from cineplan.services.cinema import CinemaContext


class FakeTerminal:
    """Feeds scripted input lines and records everything written."""

    def __init__(self, lines: list[str] | None = None) -> None:
        self._lines: Iterator[str] = iter(lines or [])
        self.output: list[str] = []

    def read(self, prompt: str) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def console(cinema: CinemaContext, terminal: FakeTerminal) -> CinemaConsole:
    return CinemaConsole(cinema, read=terminal.read, write=terminal.write)


def stock(console: CinemaConsole) -> None:
    console.execute('add-room "Hall A" 100')
    console.execute('add-movie "Alpha" 01:00')
    console.execute('add-movie "Beta" 01:30')


class TestCatalogCommands:
    def test_add_room(self, console: CinemaConsole, terminal: FakeTerminal) -> None:
        console.execute('add-room "Hall A" 100')

        assert console.cinema.rooms["Hall A"].capacity == 100
        assert "Added room: Hall A (100 seats)" in terminal.text

    def test_add_room_bad_capacity(self, console: CinemaConsole, terminal: FakeTerminal) -> None:
        console.execute('add-room "Hall A" lots')

        assert console.cinema.rooms == {}
        assert "Invalid capacity" in terminal.text

    def test_add_room_twice_warns_once(
        self,
        console: CinemaConsole,
        terminal: FakeTerminal,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        console.execute('add-room "Hall A" 100')
        with caplog.at_level(logging.WARNING):
            console.execute('add-room "Hall A" 80')

        assert caplog.text.count("Room 'Hall A' already exists. Updating...") == 1
        assert "already exists" not in terminal.text
        assert console.cinema.rooms["Hall A"].capacity == 80

    def test_add_movie(self, console: CinemaConsole, terminal: FakeTerminal) -> None:
        console.execute('add-movie "The Long Film" 02:15')
        assert "Added movie: The Long Film (2h 15m)" in terminal.text

    def test_add_movie_zero_duration(self, console: CinemaConsole, terminal: FakeTerminal) -> None:
        console.execute('add-movie "Alpha" 00:00')

        assert console.cinema.movies == {}
        assert "Invalid duration" in terminal.text

    def test_wrong_argument_count_prints_usage(
        self, console: CinemaConsole, terminal: FakeTerminal
    ) -> None:
        console.execute("add-room Hall")
        assert 'Usage: add-room "<name>" <capacity>' in terminal.text


class TestShowCommands:
    def test_add_show_and_list(self, console: CinemaConsole, terminal: FakeTerminal) -> None:
        stock(console)

        console.execute('add-show "Alpha" "Hall A" 2026-03-01T10:00 12.5')
        console.execute("list-shows 2026-03-01")

        assert "Show created:" in terminal.text
        assert "SHOWS FOR 2026-03-01 (1)" in terminal.text
        assert "Time: 2026-03-01 10:00 - 11:00" in terminal.text
        assert "Price: $12.50" in terminal.text

    def test_add_show_unknown_movie_lists_available(
        self, console: CinemaConsole, terminal: FakeTerminal
    ) -> None:
        stock(console)

        console.execute('add-show "Gamma" "Hall A" 2026-03-01T10:00 10')

        assert "Movie 'Gamma' not found. Add it first." in terminal.text
        assert "Available: Alpha, Beta" in terminal.text
        assert len(console.cinema.store) == 0

    @pytest.mark.parametrize("price", ["-1", "free", "nan"])
    def test_add_show_bad_price(
        self, console: CinemaConsole, terminal: FakeTerminal, price: str
    ) -> None:
        stock(console)

        console.execute(f'add-show "Alpha" "Hall A" 2026-03-01T10:00 {price}')

        assert "Invalid price" in terminal.text
        assert len(console.cinema.store) == 0

    def test_list_shows_empty_day(self, console: CinemaConsole, terminal: FakeTerminal) -> None:
        console.execute("list-shows 2026-03-01")
        assert "No shows on 2026-03-01" in terminal.text

    def test_list_shows_bad_date(self, console: CinemaConsole, terminal: FakeTerminal) -> None:
        console.execute("list-shows 01/03/2026")
        assert "Invalid date" in terminal.text


class TestBookCommand:
    def test_book_seats(self, console: CinemaConsole, terminal: FakeTerminal) -> None:
        stock(console)
        console.execute('add-show "Alpha" "Hall A" 2026-03-01T10:00 10')
        show = console.cinema.store.all()[0]

        console.execute(f"book {show.id.hex} 1 2 3")

        assert "Booked 3 seat(s): 1, 2, 3" in terminal.text
        assert "Remaining: 97/100" in terminal.text

    def test_book_taken_seat(self, console: CinemaConsole, terminal: FakeTerminal) -> None:
        stock(console)
        console.execute('add-show "Alpha" "Hall A" 2026-03-01T10:00 10')
        show = console.cinema.store.all()[0]

        console.execute(f"book {show.id.hex} 1")
        console.execute(f"book {show.id.hex} 1 2")

        assert "Booking failed. Some seats may be taken." in terminal.text
        assert show.booked_seats == {1}

    def test_book_out_of_range(self, console: CinemaConsole, terminal: FakeTerminal) -> None:
        stock(console)
        console.execute('add-show "Alpha" "Hall A" 2026-03-01T10:00 10')
        show = console.cinema.store.all()[0]

        console.execute(f"book {show.id.hex} 5 101")

        assert "Invalid seats: 101" in terminal.text
        assert "Seats must be between 1 and 100" in terminal.text
        assert show.available_seats == 100

    def test_book_bad_id(self, console: CinemaConsole, terminal: FakeTerminal) -> None:
        console.execute("book nope 1")
        assert "Invalid show ID format." in terminal.text

    def test_book_unknown_show(self, console: CinemaConsole, terminal: FakeTerminal) -> None:
        console.execute(f"book {'0' * 32} 1")
        assert "Show not found." in terminal.text


class TestMarathonCommand:
    def test_marathon_report(self, console: CinemaConsole, terminal: FakeTerminal) -> None:
        stock(console)
        console.execute('add-show "Alpha" "Hall A" 2026-03-01T10:00 10')
        console.execute('add-show "Beta" "Hall A" 2026-03-01T11:30 8')
        console.execute('add-show "Beta" "Hall A" 2026-03-01T10:30 8')

        console.execute("marathon 2026-03-01")

        assert "You can watch 2 movie(s)!" in terminal.text
        assert "Break: 30 minutes" in terminal.text
        assert "Total Time: 2h 30m" in terminal.text
        assert "Total Cost: $18.00" in terminal.text
        assert "Avg Price: $9.00" in terminal.text

    def test_marathon_empty_day(self, console: CinemaConsole, terminal: FakeTerminal) -> None:
        console.execute("marathon 2026-03-01")
        assert "No marathon plan for 2026-03-01" in terminal.text


class TestLoop:
    def test_menu_choice_prompts_for_arguments(self, cinema: CinemaContext) -> None:
        terminal = FakeTerminal(["1", "Hall A", "40", "exit"])
        CinemaConsole(cinema, read=terminal.read, write=terminal.write).run()

        assert cinema.rooms["Hall A"].capacity == 40
        assert terminal.output[-1] == "\nGoodbye"

    def test_book_menu_splits_seat_answer(self, cinema: CinemaContext) -> None:
        cinema.add_room("Hall A", 10)
        cinema.add_movie("Alpha", timedelta(hours=1))
        show = cinema.create_show(
            "Alpha", "Hall A", datetime(2026, 3, 1, 10, 0), 5
        )
        terminal = FakeTerminal(["5", show.id.hex, "3 4"])

        CinemaConsole(cinema, read=terminal.read, write=terminal.write).run()

        assert show.booked_seats == {3, 4}

    def test_stops_at_end_of_input(self, cinema: CinemaContext) -> None:
        terminal = FakeTerminal(["help"])
        CinemaConsole(cinema, read=terminal.read, write=terminal.write).run()
        assert "MENU:" in terminal.text

    def test_unknown_command_keeps_running(
        self, console: CinemaConsole, terminal: FakeTerminal
    ) -> None:
        assert console.execute("dance") is True
        assert "Unknown command: 'dance'" in terminal.text

    def test_invalid_menu_choice(self, console: CinemaConsole, terminal: FakeTerminal) -> None:
        console.execute("9")
        assert "Invalid choice: 9" in terminal.text

    def test_zero_exits(self, console: CinemaConsole) -> None:
        assert console.execute("0") is False
