"""Donors and the file-backed manager that tracks their donations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .recipients import Recipient


class DonorNotFoundError(LookupError):
    """Raised when a donation names a donor who is not registered."""


@dataclass
class Donor:
    """A registered donor and the running totals of what they have given."""

    name: str
    contact: str
    donor_id: int
    donation_frequency: int = 0
    money_donated: float = 0.0

    def add_money(self, amount: float) -> None:
        self.money_donated += amount


class DonorManager:
    """Registered donors, persisted as whitespace-separated records."""

    def __init__(self, path: str | Path = "donors.dat") -> None:
        self.path = Path(path)
        self._donors: list[Donor] = []
        self.load()

    def load(self) -> None:
        """Replace the donors with those in the data file, if it exists.

        Reading stops at the first record that cannot be parsed.
        """
        try:
            tokens = self.path.read_text().split()
        except FileNotFoundError:
            return
        self._donors.clear()
        for start in range(0, len(tokens) - 3, 4):
            name, contact, raw_id, raw_freq = tokens[start:start + 4]
            try:
                donor_id, frequency = int(raw_id), int(raw_freq)
            except ValueError:
                break
            self._donors.append(Donor(name, contact, donor_id, max(frequency, 0)))

    def save(self) -> None:
        with self.path.open("w") as out:
            for donor in self._donors:
                out.write(
                    f"{donor.name} {donor.contact} {donor.donor_id} "
                    f"{donor.donation_frequency}\n"
                )

    def register(self, name: str, contact: str, donor_id: int) -> Donor:
        donor = Donor(name, contact, donor_id)
        self._donors.append(donor)
        return donor

    def find_by_name(self, name: str) -> Donor | None:
        return next((donor for donor in self._donors if donor.name == name), None)

    def _require(self, name: str) -> Donor:
        donor = self.find_by_name(name)
        if donor is None:
            raise DonorNotFoundError("Donor not found!")
        return donor

    def track_donation(self, name: str, recipient: Recipient, food_amount: float) -> None:
        """Count a food donation by the named donor to the recipient."""
        donor = self._require(name)
        donor.donation_frequency += 1
        recipient.add_food(food_amount)

    def track_money_donation(self, name: str, amount: float) -> None:
        donor = self._require(name)
        donor.donation_frequency += 1
        donor.add_money(amount)

    def delete(self, donor_id: int) -> bool:
        """Remove the first donor with this id; False if there is none."""
        for index, donor in enumerate(self._donors):
            if donor.donor_id == donor_id:
                del self._donors[index]
                return True
        return False

    def describe_ids(self) -> str:
        if not self._donors:
            return "No donors registered.\n"
        rule = "----------------------\n"
        body = "".join(
            f"ID: {donor.donor_id} | Name: {donor.name}\n" for donor in self._donors
        )
        return "\nRegistered Donor IDs:\n" + rule + body + rule

    def __iter__(self) -> Iterator[Donor]:
        return iter(list(self._donors))

    def __len__(self) -> int:
        return len(self._donors)

    def __enter__(self) -> DonorManager:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.save()