"""Interactive text console for managing shows and planning marathons."""

import argparse
import logging
import sys
import uuid
from collections.abc import Callable
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from cineplan.config import settings
from cineplan.exceptions import CatalogLookupError, CinemaError
from cineplan.models import Show
from cineplan.services.cinema import CinemaContext
from cineplan.utils.text import format_duration, parse_duration, split_command

logger = logging.getLogger(__name__)

RULE = "=" * 80
THIN_RULE = "-" * 80

MENU = f"""MENU:
{THIN_RULE}

  [0] Exit

  Management:
    [1] Add Room
    [2] Add Movie
    [3] Add Show

  View & Book:
    [4] List Shows
    [5] Book Seats
    [6] Marathon Plan

  [menu/help] - Show this menu

{THIN_RULE}

Tip: Type a number (0-6) or the full command
"""


class CinemaConsole:
    """
    Line-oriented front end over a CinemaContext.

    Each command is either typed in full (``add-room "Hall A" 100``) or
    chosen by menu number, in which case its arguments are prompted for.
    """

    def __init__(
        self,
        cinema: CinemaContext | None = None,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.cinema = cinema or CinemaContext()
        self.read = read
        self.write = write
        self.currency = settings.currency_symbol
        self.handlers: dict[str, Callable[[list[str]], None]] = {
            "add-room": self.handle_add_room,
            "add-movie": self.handle_add_movie,
            "add-show": self.handle_add_show,
            "list-shows": self.handle_list_shows,
            "book": self.handle_book,
            "marathon": self.handle_marathon,
        }
        self.prompts: dict[int, tuple[str, list[str]]] = {
            1: ("add-room", ["Name", "Capacity"]),
            2: ("add-movie", ["Title", "Duration (HH:mm)"]),
            3: ("add-show", ["Movie title", "Room name", "Start time (yyyy-MM-ddTHH:mm)", "Price"]),
            4: ("list-shows", ["Date (yyyy-MM-dd)"]),
            5: ("book", ["Show ID", "Seat numbers (space-separated)"]),
            6: ("marathon", ["Date (yyyy-MM-dd)"]),
        }

    def run(self) -> None:
        """Read and execute commands until ``exit`` or end of input."""
        self.write(RULE)
        self.write("CINEMA MANAGEMENT SYSTEM".rjust(45))
        self.write(RULE)
        self.write("")
        self.write(MENU)

        while True:
            try:
                line = self.read("\n> ")
            except EOFError:
                break

            if not self.execute(line):
                break

    def execute(self, line: str) -> bool:
        """
        Execute one console line.

        Returns:
            False when the console should stop, True otherwise
        """
        parts = split_command(line.strip())
        if not parts:
            return True

        cmd = parts[0].lower()
        if cmd in ("exit", "0"):
            self.write("\nGoodbye")
            return False

        try:
            if cmd.isdigit():
                self.run_menu_choice(int(cmd))
            elif cmd in ("menu", "help"):
                self.write(MENU)
            elif cmd in self.handlers:
                self.handlers[cmd](parts)
            else:
                self.write(f"\nUnknown command: '{cmd}'. Type 'menu' for help.")
        except CinemaError as e:
            logger.debug(f"Command '{cmd}' failed: {e}")
            self.write(f"\nError: {e}")

        return True

    def run_menu_choice(self, choice: int) -> None:
        if choice not in self.prompts:
            self.write(f"\nInvalid choice: {choice}. Enter 0-6 or type 'menu'.")
            return

        cmd, labels = self.prompts[choice]
        self.write(f"\n[{cmd.replace('-', ' ').title()}]")
        answers = [self.read(f"{label}: ").strip() for label in labels]

        # Seat numbers arrive as one space-separated answer
        if cmd == "book":
            answers = answers[:1] + answers[1].split()
        self.handlers[cmd]([cmd, *answers])

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def handle_add_room(self, parts: list[str]) -> None:
        if len(parts) != 3:
            self.write('Usage: add-room "<name>" <capacity>')
            return

        name = parts[1]
        try:
            capacity = int(parts[2])
        except ValueError:
            capacity = 0
        if capacity <= 0:
            self.write("Invalid capacity. Must be a positive number.")
            return

        self.cinema.add_room(name, capacity)
        self.write(f"Added room: {name} ({capacity} seats)")

    def handle_add_movie(self, parts: list[str]) -> None:
        if len(parts) != 3:
            self.write('Usage: add-movie "<title>" <duration>')
            return

        title = parts[1]
        try:
            duration = parse_duration(parts[2])
        except ValueError:
            duration = None
        if not duration:
            self.write("Invalid duration. Use format HH:mm")
            return

        self.cinema.add_movie(title, duration)
        self.write(f"Added movie: {title} ({format_duration(duration)})")

    def handle_add_show(self, parts: list[str]) -> None:
        if len(parts) != 5:
            self.write('Usage: add-show "<movie>" "<room>" <datetime> <price>')
            return

        _, movie_title, room_name, start_text, price_text = parts

        try:
            start = datetime.fromisoformat(start_text)
        except ValueError:
            self.write("Invalid datetime. Use format: yyyy-MM-ddTHH:mm")
            return

        try:
            price = Decimal(price_text)
        except InvalidOperation:
            price = Decimal(-1)
        if not price.is_finite() or price < 0:
            self.write("Invalid price. Must be a non-negative number.")
            return

        try:
            show = self.cinema.create_show(movie_title, room_name, start.replace(tzinfo=None), price)
        except CatalogLookupError as e:
            self.write(str(e))
            if e.known:
                self.write(f"Available: {', '.join(e.known)}")
            return

        self.write("Show created:")
        self._write_show(show)

    def handle_list_shows(self, parts: list[str]) -> None:
        if len(parts) != 2:
            self.write("Usage: list-shows <date>")
            return

        day = self._parse_day(parts[1])
        if day is None:
            return

        shows = self.cinema.store.on_day(day)
        if not shows:
            self.write(f"\nNo shows on {day:%Y-%m-%d}")
            return

        self.write(f"\n{RULE}")
        self.write(f"SHOWS FOR {day:%Y-%m-%d} ({len(shows)})")
        self.write(f"{RULE}\n")
        for i, show in enumerate(shows):
            self.write(f"#{i + 1}")
            self._write_show(show, suffix=" available")
            if i < len(shows) - 1:
                self.write("")
        self.write(f"\n{RULE}")

    def handle_book(self, parts: list[str]) -> None:
        if len(parts) < 3:
            self.write("Usage: book <showId> <seat1> [seat2] ...")
            return

        try:
            show_id = uuid.UUID(parts[1])
        except ValueError:
            self.write("Invalid show ID format.")
            return

        show = self.cinema.store.find(show_id)
        if show is None:
            self.write("Show not found.")
            return

        seats: list[int] = []
        for text in parts[2:]:
            try:
                seats.append(int(text))
            except ValueError:
                self.write(f"Invalid seat number: {text}")
                return

        invalid = show.unavailable_seats(seats)
        if invalid:
            self.write(f"Invalid seats: {', '.join(map(str, invalid))}")
            self.write(f"Seats must be between 1 and {show.room.capacity}")
            return

        if show.try_book(seats):
            self.write(f"Booked {len(seats)} seat(s): {', '.join(map(str, seats))}")
            self.write(f"Show: {show.movie.title} at {show.start:%Y-%m-%d %H:%M}")
        else:
            self.write("Booking failed. Some seats may be taken.")
        self.write(f"Remaining: {show.available_seats}/{show.room.capacity}")

    def handle_marathon(self, parts: list[str]) -> None:
        if len(parts) != 2:
            self.write("Usage: marathon <date>")
            return

        day = self._parse_day(parts[1])
        if day is None:
            return

        plan = self.cinema.plan_marathon(day)
        if not plan:
            self.write(f"\nNo marathon plan for {day:%Y-%m-%d}")
            return

        summary = self.cinema.planner.summarize(day, plan)

        self.write(f"\n{RULE}")
        self.write(f"MARATHON PLAN - {day:%Y-%m-%d}")
        self.write(RULE)
        self.write(f"\nYou can watch {summary.movie_count} movie(s)!\n")

        for i, stop in enumerate(summary.stops):
            show = stop.show
            self.write(f"Movie #{i + 1}")
            self.write(f"  ID: {show.id.hex}")
            self.write(f"  Title: {show.movie.title}")
            self.write(f"  Room: {show.room.name}")
            self.write(f"  Start: {show.start:%Y-%m-%d %H:%M}")
            self.write(f"  End: {show.end:%Y-%m-%d %H:%M}")
            self.write(f"  Duration: {format_duration(show.movie.duration)}")
            self.write(f"  Price: {self.currency}{show.price:.2f}")
            self.write(f"  Seats: {show.available_seats}/{show.room.capacity}")
            if stop.break_after is not None:
                gap_minutes = int(stop.break_after.total_seconds()) // 60
                if gap_minutes > 0:
                    self.write(f"  Break: {gap_minutes} minutes")
                self.write("")

        self.write(f"\n{RULE}")
        self.write("SUMMARY")
        self.write(RULE)
        self.write(f"  Movies: {summary.movie_count}")
        self.write(f"  Total Time: {format_duration(summary.total_time)}")
        self.write(f"  Total Cost: {self.currency}{summary.total_cost:.2f}")
        self.write(f"  Avg Price: {self.currency}{summary.average_price:.2f}")
        self.write(f"\n{RULE}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _parse_day(self, text: str) -> date | None:
        try:
            return date.fromisoformat(text)
        except ValueError:
            self.write("Invalid date. Use format: yyyy-MM-dd")
            return None

    def _write_show(self, show: Show, suffix: str = "") -> None:
        self.write(f"  ID: {show.id.hex}")
        self.write(f"  Movie: {show.movie.title}")
        self.write(f"  Room: {show.room.name}")
        self.write(f"  Time: {show.start:%Y-%m-%d %H:%M} - {show.end:%H:%M}")
        self.write(f"  Price: {self.currency}{show.price:.2f}")
        self.write(f"  Seats: {show.available_seats}/{show.room.capacity}{suffix}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Manage rooms, movies and shows, book seats and plan movie marathons."
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        metavar="LEVEL",
        help=f"Logging level (default: {settings.log_level})",
    )
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), stream=sys.stderr)

    CinemaConsole().run()


if __name__ == "__main__":
    main()
