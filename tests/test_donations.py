import io

import pytest

from foodbank.donations import Donation, process_donation, sort_by_quantity
from foodbank.donors import DonorManager, DonorNotFoundError
from foodbank.recipients import Recipient, RecipientRegistry


@pytest.fixture
def setup(tmp_path):
    donors = DonorManager(tmp_path / "donors.dat")
    donors.register("Ann", "ann@example.com", 7)
    recipients = RecipientRegistry(tmp_path / "recipients.dat")
    recipients.add(Recipient("Food Bank", 101))
    return donors, recipients, tmp_path


def test_food_constructor_fields():
    d = Donation.food(7, "Ann", 101, "Rice", 5, "01-02-2024")
    assert d.is_money is False
    assert d.money_amount == 0
    assert (d.food_type, d.quantity, d.date) == ("Rice", 5, "01-02-2024")


def test_money_constructor_fields():
    d = Donation.money(7, "Ann", 101, 12.5, "01-02-2024")
    assert d.is_money is True
    assert d.quantity == 0
    assert d.food_type == ""
    assert d.money_amount == 12.5


def test_write_format():
    out = io.StringIO()
    Donation.food(7, "Ann", 101, "Rice", 5, "01-02-2024").write(out)
    assert out.getvalue() == "7\nAnn\n101\nRice\n5\n01-02-2024\n0\n0\n"


@pytest.mark.parametrize(
    "donation",
    [
        Donation.food(7, "Ann Lee", 101, "Rice", 5, "01-02-2024"),
        Donation.money(8, "Bob", 102, 12.5, "15-06-2023"),
    ],
)
def test_round_trip(donation):
    buf = io.StringIO()
    donation.write(buf)
    buf.seek(0)
    assert Donation.read(buf) == donation


def test_read_empty_raises_eof():
    with pytest.raises(EOFError):
        Donation.read(io.StringIO(""))


def test_read_bad_record_raises_value_error():
    with pytest.raises(ValueError):
        Donation.read(io.StringIO("x\nAnn\n"))


def test_describe_food():
    d = Donation.food(7, "Ann", 101, "Rice", 5, "01-02-2024")
    assert d.describe() == (
        "Date: 01-02-2024 | Donor: Ann | Recipient ID: 101 | "
        "Food: Rice | Quantity: 5 kg\n"
    )


def test_describe_money_has_two_decimals():
    d = Donation.money(7, "Ann", 101, 12.5, "01-02-2024")
    assert d.describe().endswith("Donation: Money | Amount: $12.50\n")


def test_date_parts():
    d = Donation.food(7, "Ann", 101, "Rice", 5, "03-11-2024")
    assert (d.day(), d.month(), d.year()) == (3, 11, 2024)


def test_is_newer_than():
    old = Donation.food(7, "Ann", 101, "Rice", 5, "31-12-2023")
    new = Donation.food(7, "Ann", 101, "Rice", 5, "01-01-2024")
    assert new.is_newer_than(old)
    assert not old.is_newer_than(new)
    assert not new.is_newer_than(new)


def test_sort_by_quantity_descending_and_stable():
    a = Donation.food(1, "A", 101, "x", 3, "01-01-2024")
    b = Donation.food(2, "B", 101, "x", 9, "01-01-2024")
    c = Donation.food(3, "C", 101, "x", 3, "01-01-2024")
    assert sort_by_quantity([a, b, c]) == [b, a, c]


def test_process_food_donation(setup):
    donors, recipients, tmp_path = setup
    donation = Donation.food(7, "Ann", 101, "Rice", 5, "01-02-2024")
    assert process_donation(donors, recipients, donation) is True
    rec = recipients.find(101)
    assert rec.total_kg == 5
    assert rec.donation_count == 1
    assert donors.find_by_name("Ann").donation_frequency == 1
    assert RecipientRegistry(tmp_path / "recipients.dat").find(101).total_kg == 5


def test_process_money_donation(setup):
    donors, recipients, _ = setup
    donation = Donation.money(7, "Ann", 101, 12.5, "01-02-2024")
    assert process_donation(donors, recipients, donation) is True
    rec = recipients.find(101)
    assert rec.total_money == 12.5
    assert rec.donation_count == 1
    assert donors.find_by_name("Ann").money_donated == 12.5


def test_process_unknown_recipient(setup):
    donors, recipients, _ = setup
    donation = Donation.food(7, "Ann", 999, "Rice", 5, "01-02-2024")
    assert process_donation(donors, recipients, donation) is False
    assert donors.find_by_name("Ann").donation_frequency == 0


def test_process_unknown_donor_raises(setup):
    donors, recipients, _ = setup
    with pytest.raises(DonorNotFoundError):
        process_donation(donors, recipients, Donation.money(1, "Zed", 101, 3.0, "01-02-2024"))