"""Food and money donations, their text record format and their processing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, TextIO

from .donors import DonorManager
from .recipients import RecipientRegistry


def _next_line(stream: TextIO) -> str:
    line = stream.readline()
    if line.endswith("\n"):
        line = line[:-1]
    return line


@dataclass(frozen=True)
class Donation:
    """A single donation of food (in kg) or money from a donor to a recipient."""

    donor_id: int
    donor_name: str
    recipient_id: int
    food_type: str = ""
    quantity: int = 0
    date: str = ""
    is_money: bool = False
    money_amount: float = 0.0

    @classmethod
    def food(
        cls,
        donor_id: int,
        donor_name: str,
        recipient_id: int,
        food_type: str,
        quantity: int,
        date: str,
    ) -> Donation:
        return cls(donor_id, donor_name, recipient_id, food_type, quantity, date)

    @classmethod
    def money(
        cls,
        donor_id: int,
        donor_name: str,
        recipient_id: int,
        amount: float,
        date: str,
    ) -> Donation:
        return cls(
            donor_id, donor_name, recipient_id, "", 0, date, is_money=True, money_amount=amount
        )

    def write(self, stream: TextIO) -> None:
        """Write this donation as eight lines of text."""
        stream.write(
            f"{self.donor_id}\n{self.donor_name}\n{self.recipient_id}\n"
            f"{self.food_type}\n{self.quantity}\n{self.date}\n"
            f"{int(self.is_money)}\n{self.money_amount:g}\n"
        )

    @classmethod
    def read(cls, stream: TextIO) -> Donation:
        """Read one donation written by :meth:`write`.

        Raises EOFError at the end of the stream and ValueError on a bad record.
        """
        first = stream.readline()
        if first == "":
            raise EOFError("no more donations")
        donor_id = int(first.strip())
        name = _next_line(stream)
        recipient_id = int(_next_line(stream).strip())
        food_type = _next_line(stream)
        quantity = int(_next_line(stream).strip())
        date = _next_line(stream)
        is_money = bool(int(_next_line(stream).strip()))
        amount = float(_next_line(stream).strip())
        if is_money:
            return cls.money(donor_id, name, recipient_id, amount, date)
        return cls.food(donor_id, name, recipient_id, food_type, quantity, date)

    def describe(self) -> str:
        head = (
            f"Date: {self.date} | Donor: {self.donor_name} | "
            f"Recipient ID: {self.recipient_id} | "
        )
        if self.is_money:
            return head + f"Donation: Money | Amount: ${self.money_amount:.2f}\n"
        return head + f"Food: {self.food_type} | Quantity: {self.quantity} kg\n"

    def year(self) -> int:
        return int(self.date[6:10])

    def month(self) -> int:
        return int(self.date[3:5])

    def day(self) -> int:
        return int(self.date[0:2])

    def is_newer_than(self, other: Donation) -> bool:
        """Compare the DD-MM-YYYY dates of two donations."""
        return (self.year(), self.month(), self.day()) > (
            other.year(),
            other.month(),
            other.day(),
        )


def sort_by_quantity(donations: Iterable[Donation]) -> list[Donation]:
    """Return the donations by quantity, largest first, ties in original order."""
    return sorted(donations, key=lambda donation: -donation.quantity)


def process_donation(
    donors: DonorManager, recipients: RecipientRegistry, donation: Donation
) -> bool:
    """Apply a donation to the donor and recipient totals.

    Returns False when the recipient is unknown. Raises DonorNotFoundError
    when the donor is not registered.
    """
    if donation.is_money:
        donors.track_money_donation(donation.donor_name, donation.money_amount)
        rec = recipients.find(donation.recipient_id)
        if rec is None:
            return False
        rec.add_money(donation.money_amount)
        rec.donation_count += 1
        recipients.save()
        return True
    rec = recipients.find(donation.recipient_id)
    if rec is None:
        return False
    donors.track_donation(donation.donor_name, rec, donation.quantity)
    recipients.save()
    return True