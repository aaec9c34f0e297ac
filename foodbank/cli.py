"""Interactive menu for registering donors, recording donations and reporting."""

from __future__ import annotations

import argparse
import random
import re
import sys
from pathlib import Path
from typing import Callable, TextIO

from .donations import Donation, process_donation
from .donors import DonorManager
from .recipients import NoPendingRequestsError, Recipient, RecipientRegistry
from .reporting import RankingKind, Reporting, SortKey

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

DEFAULT_RECIPIENTS = ((101, "Food Bank"), (102, "Shelter"))

_MENU = (
    "-------------------------------------\n"
    "1. Register Donor\n"
    "2. Create Donation\n"
    "3. Donation Report\n"
    "4. Distribution Report\n"
    "5. Donor Report\n"
    "6. Overall Summary\n"
    "7. Distribution Summary\n"
    "8. Donor Rankings\n"
    "9. Delete Donors\n"
    "10. Food Requests\n"
    "11. Distributed Food\n"
    "12. Clear All Recipients Data\n"
    "E. Exit\n"
    "Choose an option: "
)

_SORT_PROMPT = (
    "Sort donations by:\n"
    "1. Quantity (highest first)\n"
    "2. Date (newest first)\n"
    "3. Money (highest first)\n"
    "4. Back to Main Menu\n"
    "Choose option: "
)

_RANKING_PROMPT = (
    "\nRank Donors By:\n"
    "1. Donation Frequency\n"
    "2. Total Kg Donated\n"
    "3. Total Money Donated\n"
    "4. Back to Main Menu\n"
    "Choose ranking type: "
)

_GENERIC_INVALID = "Invalid input. Please enter a number or 'e' to exit.\n"
_SAVED = "Recipient data saved successfully.\n"


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if not match:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _try_int(text: str) -> int | None:
    try:
        return _parse_int(text)
    except ValueError:
        return None


def _try_float(text: str) -> float | None:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else None


def is_valid_date(date: str) -> bool:
    """Check a DD-MM-YYYY date: its shape and the day and month ranges."""
    if len(date) != 10 or date[2] != "-" or date[5] != "-":
        return False
    day = _try_int(date[0:2])
    month = _try_int(date[3:5])
    if day is None or month is None:
        return False
    return 1 <= day <= 31 and 1 <= month <= 12


def menu_text() -> str:
    return _MENU


class FoodBankShell:
    """Reads menu choices line by line and carries them out."""

    def __init__(
        self,
        donors: DonorManager,
        recipients: RecipientRegistry,
        reporting: Reporting,
        input_func: Callable[[], str] | None = None,
        output: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.donors = donors
        self.recipients = recipients
        self.reporting = reporting
        self._input = input_func if input_func is not None else input
        self._output = output if output is not None else sys.stdout
        self._rng = rng if rng is not None else random.Random()
        self._actions: dict[int, Callable[[], None]] = {
            1: self._register_donor,
            2: self._create_donation,
            3: self._donation_report,
            4: self._distribution_report,
            5: lambda: self._write(self.reporting.donor_report()),
            6: lambda: self._write(self.reporting.overall_summary()),
            7: self._distribution_summary,
            8: self._donor_rankings,
            9: self._delete_donor,
            10: self._food_request,
            11: self._distribute_food,
            12: self._clear_recipients,
        }

    def _write(self, text: str) -> None:
        self._output.write(text)

    def _read(self, prompt: str = "") -> str:
        if prompt:
            self._write(prompt)
            self._output.flush()
        return self._input().rstrip("\r\n")

    def _read_token(self, prompt: str = "") -> str:
        line = self._read(prompt)
        while not line.split():
            line = self._read()
        return line.split()[0]

    def run(self) -> None:
        """Show the menu until the user exits or the input runs out."""
        try:
            while True:
                token = self._read_token(menu_text())
                if token in ("e", "E"):
                    self._write("Exiting...\n")
                    return
                try:
                    action = self._actions.get(_parse_int(token))
                    if action is None:
                        self._write("Invalid choice. Please try again.\n")
                    else:
                        action()
                except ValueError:
                    self._write(_GENERIC_INVALID)
        except EOFError:
            return

    def _donor_names(self) -> str:
        return "\nRegistered Donors:\n" + "".join(f"- {d.name}\n" for d in self.donors)

    def _show_choices(self) -> None:
        self._write("\nAvailable Recipients:\n")
        self._write(self.recipients.describe_all())
        self._write(self._donor_names())

    def _process(self, donation: Donation) -> None:
        if process_donation(self.donors, self.recipients, donation) and self.recipients.autosave:
            self._write(_SAVED)
        self.reporting.add_donation(donation)

    def _register_donor(self) -> None:
        name = self._read("Enter donor name: ")
        contact = self._read("Enter donor contact details: ")
        donor_id = self._rng.randint(100, 999)
        self.donors.register(name, contact, donor_id)
        self._write(f"Your ID is {donor_id}\nDonor registered successfully!\n")

    def _create_donation(self) -> None:
        kind = _try_int(
            self._read("Choose donation type:\n1. Food\n2. Money\nEnter choice: ")
        )
        if kind == 1:
            self._food_donation()
        elif kind == 2:
            self._money_donation()
        else:
            # Any other type carries on into the donation report.
            self._donation_report()

    def _food_donation(self) -> None:
        self._show_choices()
        donor_name = self._read("\nEnter donor name (or 'cancel' to abort): ")
        if donor_name == "cancel":
            return
        donor = self.donors.find_by_name(donor_name)
        if donor is None:
            self._write("Donor not found. Returning to menu.\n")
            return
        recipient_id = _try_int(self._read("Enter recipient ID: "))
        if recipient_id is None:
            self._write("Invalid input. Returning to menu.\n")
            return
        food_type = self._read("Enter food type: ")
        quantity = _try_int(self._read("Enter quantity (in kg): "))
        if quantity is None or quantity <= 0:
            self._write("Invalid quantity. Returning to menu.\n")
            return
        date = self._read("Enter donation date (DD-MM-YYYY): ")
        if not is_valid_date(date):
            self._write("Invalid date format. Returning to menu.\n")
            return
        if recipient_id not in self.recipients:
            self._write("Recipient not found. Returning to menu.\n")
            return
        self._process(
            Donation.food(donor.donor_id, donor_name, recipient_id, food_type, quantity, date)
        )
        self._write("\nDonation recorded successfully!\n")

    def _money_donation(self) -> None:
        self._show_choices()
        donor_name = self._read("\nEnter donor name (or 'cancel' to abort): ")
        if donor_name == "cancel":
            return
        recipient_id = _try_int(self._read("Enter recipient ID: "))
        while recipient_id is None:
            recipient_id = _try_int(self._read("Invalid input. Please enter a number: "))
        amount = _try_float(self._read("Enter amount to donate ($): "))
        while amount is None or amount <= 0:
            amount = _try_float(self._read("Invalid amount. Please enter positive number: "))
        date = self._read("Enter donation date (DD-MM-YYYY): ")
        while not is_valid_date(date):
            date = self._read("Invalid date. Use DD-MM-YYYY format: ")
        donor = self.donors.find_by_name(donor_name)
        if donor is None:
            self._write("Donor not found. Returning to menu.\n")
            return
        if recipient_id not in self.recipients:
            self._write("Recipient not found. Returning to menu.\n")
            return
        self._process(Donation.money(donor.donor_id, donor_name, recipient_id, amount, date))
        self._write("\nMoney donation recorded successfully!\n")

    def _validated_int(self, prompt: str, low: int, high: int) -> int:
        while True:
            value = _try_int(self._read(prompt))
            if value is None:
                self._write(
                    f"Invalid input. Please enter a number between {low} and {high}.\n"
                )
            elif low <= value <= high:
                return value
            else:
                self._write(f"Please enter a number between {low} and {high}.\n")

    def _donation_report(self) -> None:
        choice = self._validated_int(_SORT_PROMPT, 1, 4)
        if choice != 4:
            self._write(self.reporting.donation_report(SortKey(choice - 1)))

    def _distribution_report(self) -> None:
        self._write("\n=== Distribution Report ===\n")
        for rec in self.recipients:
            self._write(rec.describe())
            self._write(f"Money Received: ${rec.total_money:.2f}\n")
            self._write(f"Total Donations: {rec.donation_count}\n")
            self._write("--------------------------\n")
        self._write("==========================\n")

    def _distribution_summary(self) -> None:
        recipients = list(self.recipients)
        total_money = sum(rec.total_money for rec in recipients)
        total_donations = sum(rec.donation_count for rec in recipients)
        self._write(
            "\n=== Distribution Summary ===\n"
            f"Total Recipients: {len(self.recipients)}\n"
            f"Total Food Distributed: {self.recipients.total_distributed_food()} kg\n"
            f"Total Money Distributed: ${total_money:.2f}\n"
            f"Total Donations Received: {total_donations}\n"
            "===========================\n"
        )

    def _donor_rankings(self) -> None:
        choice = _try_int(self._read(_RANKING_PROMPT))
        if choice == 4:
            return
        if choice in (1, 2, 3):
            self._write(self.reporting.donor_rankings(RankingKind(choice)))
        else:
            self._write("Invalid choice!\n")

    def _delete_donor(self) -> None:
        self._write(self.donors.describe_ids())
        donor_id = _try_int(self._read("Enter donor ID to delete: "))
        if donor_id is not None and self.donors.delete(donor_id):
            self.reporting.donations = [
                d for d in self.reporting.donations if d.donor_id != donor_id
            ]
            self._write("Donor and their donations deleted successfully.\n")

    def _food_request(self) -> None:
        recipient_id = _try_int(self._read("Enter recipient ID requesting food: "))
        quantity = _try_int(self._read("Enter quantity needed (kg): "))
        rec = self.recipients.find(recipient_id) if recipient_id is not None else None
        if rec is None:
            self._write("Recipient not found!\n")
            return
        rec.request_food(quantity if quantity is not None else 0)
        self._write("Food request pending...\nFood request added to queue.\n")

    def _distribute_food(self) -> None:
        recipient_id = _try_int(self._read("Enter recipient ID to distribute food: "))
        rec = self.recipients.find(recipient_id) if recipient_id is not None else None
        if rec is None:
            self._write("Recipient not found!\n")
            return
        try:
            quantity = rec.distribute_food()
        except NoPendingRequestsError:
            self._write(f"⚠️  No pending requests for {rec.name}\n")
            return
        self._write(f"✅ Distributed {quantity:g} kg to {rec.name}\n")
        self.recipients.save()
        if self.recipients.autosave:
            self._write(_SAVED)

    def _clear_recipients(self) -> None:
        self._write("WARNING: This will permanently delete all recipients data!\n")
        confirm = self._read_token("Are you sure? (y/n): ")
        if confirm[0].lower() != "y":
            self._write("Operation cancelled.\n")
            return
        try:
            self.recipients.clear_data_file()
        except OSError as error:
            print(f"Error: {error}", file=sys.stderr)
            return
        self._write("Recipients file cleared successfully.\n")


def _add_default_recipients(recipients: RecipientRegistry) -> None:
    for recipient_id, name in DEFAULT_RECIPIENTS:
        if recipient_id not in recipients:
            recipients.add(Recipient(name, recipient_id))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Food donation management.")
    parser.add_argument(
        "--data-dir", default=".", help="directory holding the data files"
    )
    args = parser.parse_args(argv)
    data_dir = Path(args.data_dir)

    with DonorManager(data_dir / "donors.dat") as donors, RecipientRegistry(
        data_dir / "recipients.dat", autosave=False
    ) as recipients, Reporting(donors, recipients, data_dir / "donations.dat") as reporting:
        reporting.cleanup_orphaned_donations()
        _add_default_recipients(recipients)
        recipients.autosave = True
        FoodBankShell(donors, recipients, reporting).run()
        if recipients.autosave:
            print(_SAVED, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())