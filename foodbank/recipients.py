"""Recipients of donations and the file-backed registry that holds them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from .request_queue import RequestQueue

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class NoPendingRequestsError(LookupError):
    """Raised when food is distributed to a recipient with no pending request."""


class DuplicateRecipientError(ValueError):
    """Raised when a recipient id is registered twice."""


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if not match:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if not match:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


@dataclass
class Recipient:
    """An organisation that receives food and money."""

    name: str
    recipient_id: int
    total_kg: float = 0.0
    donation_count: int = 0
    total_money: float = 0.0
    requests: RequestQueue = field(default_factory=RequestQueue, compare=False, repr=False)

    def add_money(self, amount: float) -> None:
        self.total_money += amount

    def add_food(self, kg: float) -> None:
        """Record a food donation: adds the weight and counts one donation."""
        self.total_kg += kg
        self.donation_count += 1

    def verify(self, check_id: int) -> bool:
        return self.recipient_id == check_id

    def describe(self) -> str:
        return (
            f"ID: {self.recipient_id}\n"
            f"Name: {self.name}\n"
            f"Total kg received: {self.total_kg:.2f}\n"
            f"Total money received: ${self.total_money:.2f}\n"
            f"Number of donations: {self.donation_count}\n"
            "--------------------------------\n"
        )

    def request_food(self, quantity: int) -> None:
        """Queue a request for the given number of kilograms."""
        self.requests.enqueue(self.recipient_id, quantity)

    def distribute_food(self) -> float:
        """Serve the oldest pending request and return the kilograms given."""
        if not self.requests:
            raise NoPendingRequestsError(f"No pending requests for {self.name}")
        quantity = float(self.requests.dequeue().quantity)
        self.total_kg += quantity
        return quantity

    def describe_requests(self) -> str:
        return f"Pending requests: {len(self.requests)}\n" + self.requests.render()


def sort_by_id(recipients: Iterable[Recipient]) -> list[Recipient]:
    """Return the recipients ordered by id, keeping ties in their original order."""
    return sorted(recipients, key=lambda rec: rec.recipient_id)


class RecipientRegistry:
    """Recipients in insertion order, persisted to a plain-text file."""

    def __init__(self, path: str | Path = "recipients.dat", autosave: bool = True) -> None:
        self.path = Path(path)
        self.autosave = autosave
        self._recipients: dict[int, Recipient] = {}
        self.load()

    def load(self) -> None:
        """Replace the contents with the records in the data file, if it exists."""
        try:
            content = self.path.read_text()
        except FileNotFoundError:
            return
        self._recipients.clear()
        raw = content.split("\n")
        if raw and raw[-1] == "":
            raw.pop()
        lines = iter(raw)
        for line in lines:
            try:
                recipient_id = _parse_int(line)
                name = next(lines, "")
                total_kg = _parse_float(next(lines, ""))
                count = _parse_int(next(lines, ""))
                total_money = _parse_float(next(lines, ""))
            except ValueError:
                continue
            if recipient_id not in self._recipients:
                self._recipients[recipient_id] = Recipient(
                    name, recipient_id, total_kg, count, total_money
                )

    def save(self) -> None:
        """Write every recipient to the data file."""
        with self.path.open("w") as out:
            for rec in self._recipients.values():
                out.write(
                    f"{rec.recipient_id}\n{rec.name}\n{rec.total_kg:g}\n"
                    f"{rec.donation_count}\n{rec.total_money:g}\n"
                )

    def add(self, recipient: Recipient) -> None:
        if recipient.recipient_id in self._recipients:
            raise DuplicateRecipientError(
                f"Recipient ID {recipient.recipient_id} already exists!"
            )
        self._recipients[recipient.recipient_id] = recipient
        if self.autosave:
            self.save()

    def update(self, recipient_id: int, kg: float) -> bool:
        """Add a food donation to a recipient and save; False if the id is unknown."""
        rec = self.find(recipient_id)
        if rec is None:
            return False
        rec.add_food(kg)
        self.save()
        return True

    def find(self, recipient_id: int) -> Recipient | None:
        return self._recipients.get(recipient_id)

    def __iter__(self) -> Iterator[Recipient]:
        return iter(list(self._recipients.values()))

    def __len__(self) -> int:
        return len(self._recipients)

    def __contains__(self, recipient_id: object) -> bool:
        return recipient_id in self._recipients

    def describe_all(self) -> str:
        return "".join(rec.describe() for rec in self._recipients.values())

    def total_distributed_food(self) -> int:
        """Total kilograms received, truncated to whole kg after each addition."""
        total = 0
        for rec in self._recipients.values():
            total = int(total + rec.total_kg)
        return total

    def clear_data_file(self) -> None:
        """Forget every recipient and empty the data file."""
        self._recipients.clear()
        self.path.write_text("")

    def __enter__(self) -> RecipientRegistry:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.save()