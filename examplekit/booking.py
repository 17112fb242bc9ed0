"""Booking conference tickets, with an interactive command-line front end."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import TextIO

CONFERENCE_NAME = "Go Conference"
CONFERENCE_TICKETS = 50
TICKET_DELAY = 20.0


@dataclass(frozen=True)
class Booking:
    first_name: str
    last_name: str
    email: str
    tickets: int


def validate_user_input(
    first_name: str, last_name: str, email: str, tickets: int, remaining: int
) -> tuple[bool, bool, bool]:
    """Return (valid name, valid e-mail, valid ticket count)."""
    valid_name = len(first_name) >= 2 and len(last_name) >= 2
    valid_email = "@" in email
    valid_tickets = 0 < tickets <= remaining
    return valid_name, valid_email, valid_tickets


@dataclass
class BookingApp:
    """Ticket sales for one conference."""

    name: str = CONFERENCE_NAME
    total: int = CONFERENCE_TICKETS
    remaining: int = -1
    bookings: list[Booking] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.remaining < 0:
            self.remaining = self.total

    def validate(
        self, first_name: str, last_name: str, email: str, tickets: int
    ) -> tuple[bool, bool, bool]:
        """Check an order against the tickets still available."""
        return validate_user_input(first_name, last_name, email, tickets, self.remaining)

    def book(self, first_name: str, last_name: str, email: str, tickets: int) -> Booking:
        """Record an order; raises ValueError naming what is wrong with it."""
        valid_name, valid_email, valid_tickets = self.validate(
            first_name, last_name, email, tickets
        )
        problems = [
            message
            for ok, message in (
                (valid_name, "first name or last name you entered is too short"),
                (valid_email, "email address you entered doesn't contain @ sign"),
                (valid_tickets, "number of tickets you entered is invalid"),
            )
            if not ok
        ]
        if problems:
            raise ValueError("; ".join(problems))
        booking = Booking(first_name, last_name, email, tickets)
        self.remaining -= tickets
        self.bookings.append(booking)
        return booking

    def first_names(self) -> list[str]:
        """First names of all bookings, in booking order."""
        return [booking.first_name for booking in self.bookings]

    @property
    def sold_out(self) -> bool:
        return self.remaining == 0


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _send_ticket(booking: Booking, delay: float) -> None:
    time.sleep(delay)
    ticket = f"{booking.tickets} tickets for {booking.first_name} {booking.last_name}"
    print("#################")
    print(f"Sending ticket:\n {ticket} \nto email address {booking.email}")
    print("#################")


def _ask(tokens: Iterator[str], prompt: str) -> str | None:
    print(prompt)
    return next(tokens, None)


def main(argv: Sequence[str] | None = None) -> int:
    """Take orders from standard input until it runs out."""
    del argv
    app = BookingApp()
    print(f"Welcome to {app.name} booking application")
    print(f"We have total of {app.total} tickets and {app.remaining} are still available.")
    print("Get your tickets here to attend")

    tokens = _tokens(sys.stdin)
    while True:
        answers = []
        for prompt in (
            "Enter your first name: ",
            "Enter your last name: ",
            "Enter your email address: ",
            "Enter number of tickets: ",
        ):
            answer = _ask(tokens, prompt)
            if answer is None:
                return 0
            answers.append(answer)
        first_name, last_name, email, count = answers
        tickets = int(count) if count.isdigit() else 0

        try:
            booking = app.book(first_name, last_name, email, tickets)
        except ValueError as exc:
            for problem in str(exc).split("; "):
                print(problem)
            continue

        print(
            f"Thank you {first_name} {last_name} for booking {tickets} tickets. "
            f"You will receive a confirmation email at {email}"
        )
        print(f"{app.remaining} tickets remaining for {app.name}")
        threading.Thread(target=_send_ticket, args=(booking, TICKET_DELAY), daemon=True).start()
        print(f"The first names of bookings are: [{' '.join(app.first_names())}]")
        if app.sold_out:
            print("Our conference is booked out. Come back next year.")