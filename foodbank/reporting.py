"""Reports over donations, donors and recipients, with donations kept on disk."""

from __future__ import annotations

from collections import defaultdict
from enum import Enum
from pathlib import Path

from .donations import Donation
from .donors import DonorManager
from .recipients import RecipientRegistry

_SUMMARY_RULE = "----------------------------------\n"
_RANK_RULE = "--------------------------------\n"
_RANK_END = "================================\n\n"


class SortKey(Enum):
    QUANTITY = 0
    DATE = 1
    MONEY = 2


class RankingKind(Enum):
    FREQUENCY = 1
    KG = 2
    MONEY = 3


class Reporting:
    """Holds the recorded donations and renders reports over them."""

    def __init__(
        self,
        donors: DonorManager,
        recipients: RecipientRegistry,
        path: str | Path = "donations.dat",
    ) -> None:
        self.donors = donors
        self.recipients = recipients
        self.path = Path(path)
        self.donations: list[Donation] = []
        self.load()

    def load(self) -> None:
        """Replace the donations with those in the data file, if it exists.

        Reading stops at the first record that cannot be parsed.
        """
        try:
            stream = self.path.open()
        except FileNotFoundError:
            return
        with stream:
            self.donations.clear()
            while True:
                try:
                    self.donations.append(Donation.read(stream))
                except (EOFError, ValueError):
                    break

    def save(self) -> None:
        with self.path.open("w") as out:
            for donation in self.donations:
                donation.write(out)

    def add_donation(self, donation: Donation) -> None:
        self.donations.append(donation)

    def donation_report(self, sort_key: SortKey = SortKey.QUANTITY) -> str:
        if not self.donations:
            return "No donations recorded.\n"
        if sort_key is SortKey.DATE:
            ordered = sorted(self.donations, key=lambda d: d.date, reverse=True)
        elif sort_key is SortKey.MONEY:
            ordered = sorted(
                self.donations,
                key=lambda d: (not d.is_money, -d.money_amount if d.is_money else 0.0),
            )
        else:
            ordered = sorted(self.donations, key=lambda d: -d.quantity)

        total_money = sum(d.money_amount for d in ordered if d.is_money)
        total_food = sum(d.quantity for d in ordered if not d.is_money)
        rule = "══════════════════════\n"
        return (
            "\n=== Donation Report ===\n"
            + "".join(d.describe() for d in ordered)
            + rule
            + f"Total Money Donated: ${total_money:.2f}\n"
            + f"Total Food Donated: {float(total_food):.2f} kg\n"
            + rule
        )

    def distribution_report(self) -> str:
        if len(self.recipients) == 0:
            return "No recipients available for reporting.\n"
        money: dict[int, float] = defaultdict(float)
        for donation in self.donations:
            if donation.is_money:
                money[donation.recipient_id] += donation.money_amount
        parts = ["=== Recipient Distribution Report ===\n"]
        for rec in self.recipients:
            parts.append(rec.describe())
            if rec.recipient_id in money:
                parts.append(f"Total Money Received: ${money[rec.recipient_id]:.2f}\n")
            parts.append(_RANK_RULE)
        return "".join(parts)

    def donor_report(self) -> str:
        donors = list(self.donors)
        if not donors:
            return "No donors available for reporting.\n"
        rows = "".join(
            f"{d.donor_id}\t{d.name}\t\t{d.contact}\t\t{d.donation_frequency}\n"
            for d in donors
        )
        return (
            "=== Donor Report ===\n"
            "ID\tName\t\tContact\t\tDonations\n"
            "------------------------------------------------\n"
            + rows
            + "================================================\n"
        )

    def _total_money(self) -> float:
        return sum(d.money_amount for d in self.donations if d.is_money)

    def overall_summary(self) -> str:
        total_quantity = sum(d.quantity for d in self.donations if not d.is_money)
        return (
            "Overall Summary of Donations:\n"
            f"Total Donations: {len(self.donations)}\n"
            f"Total Food Donated: {total_quantity} kg\n"
            f"Total Money Donated: ${self._total_money():.2f}\n"
            + _SUMMARY_RULE
        )

    def distribution_summary(self) -> str:
        return (
            "Overall Summary of Distributions:\n"
            f"Total Recipients: {len(self.recipients)}\n"
            f"Total Food Distributed: {self.recipients.total_distributed_food()} kg\n"
            f"Total Money Distributed: ${self._total_money():.2f}\n"
            + _SUMMARY_RULE
        )

    def donor_rankings(self, kind: RankingKind) -> str:
        donors = list(self.donors)
        if kind is RankingKind.FREQUENCY:
            ranked = sorted(donors, key=lambda d: -d.donation_frequency)
            title, column = "Frequency", "Donations"
            values = [str(d.donation_frequency) for d in ranked]
        elif kind is RankingKind.KG:
            kg = {
                d.name: float(
                    sum(x.quantity for x in self.donations if x.donor_name == d.name)
                )
                for d in donors
            }
            ranked = sorted(donors, key=lambda d: -kg[d.name])
            title, column = "Kg Donated", "Kg Donated"
            values = [f"{kg[d.name]:g} kg" for d in ranked]
        else:
            ranked = sorted(donors, key=lambda d: -d.money_donated)
            title, column = "Money Donated", "Amount Donated"
            values = [f"${d.money_donated:.2f}" for d in ranked]
        rows = "".join(
            f"{rank}.\t{donor.name}\t\t{value}\n"
            for rank, (donor, value) in enumerate(zip(ranked, values), start=1)
        )
        return (
            f"\n=== Donor Rankings by {title} ===\n"
            f"Rank\tName\t\t{column}\n"
            + _RANK_RULE
            + rows
            + _RANK_END
        )

    def remove_donations_by_donor(self, donor_id: int) -> int:
        """Drop every donation by the donor, save, and return how many went."""
        before = len(self.donations)
        self.donations = [d for d in self.donations if d.donor_id != donor_id]
        self.save()
        return before - len(self.donations)

    def cleanup_orphaned_donations(self) -> int:
        """Drop donations whose donor or recipient no longer exists, then save."""
        donor_ids = {d.donor_id for d in self.donors}
        before = len(self.donations)
        self.donations = [
            d
            for d in self.donations
            if d.donor_id in donor_ids and d.recipient_id in self.recipients
        ]
        self.save()
        return before - len(self.donations)

    def __enter__(self) -> Reporting:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.save()