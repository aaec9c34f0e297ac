import pytest

from foodbank.donors import Donor, DonorManager, DonorNotFoundError
from foodbank.recipients import Recipient


@pytest.fixture
def manager(tmp_path):
    return DonorManager(tmp_path / "donors.dat")


def test_missing_file_gives_no_donors(manager):
    assert len(manager) == 0
    assert manager.describe_ids() == "No donors registered.\n"


def test_register_and_find(manager):
    donor = manager.register("alice", "alice@example.com", 123)
    assert manager.find_by_name("alice") is donor
    assert manager.find_by_name("bob") is None
    assert [d.donor_id for d in manager] == [123]


def test_track_donation_updates_both(manager):
    manager.register("alice", "alice@example.com", 123)
    rec = Recipient("Food Bank", 101)
    manager.track_donation("alice", rec, 5)
    assert manager.find_by_name("alice").donation_frequency == 1
    assert rec.total_kg == pytest.approx(5)
    assert rec.donation_count == 1


def test_track_donation_unknown_donor(manager):
    rec = Recipient("Food Bank", 101)
    with pytest.raises(DonorNotFoundError):
        manager.track_donation("ghost", rec, 5)
    assert rec.donation_count == 0


def test_track_money_donation(manager):
    manager.register("alice", "alice@example.com", 123)
    manager.track_money_donation("alice", 12.5)
    manager.track_money_donation("alice", 2.5)
    donor = manager.find_by_name("alice")
    assert donor.money_donated == pytest.approx(15.0)
    assert donor.donation_frequency == 2
    with pytest.raises(DonorNotFoundError):
        manager.track_money_donation("ghost", 1.0)


def test_delete(manager):
    manager.register("alice", "a@example.com", 1)
    manager.register("bob", "b@example.com", 2)
    assert manager.delete(1)
    assert not manager.delete(1)
    assert [d.name for d in manager] == ["bob"]


def test_describe_ids(manager):
    manager.register("alice", "a@example.com", 123)
    text = manager.describe_ids()
    assert text.startswith("\nRegistered Donor IDs:\n----------------------\n")
    assert "ID: 123 | Name: alice\n" in text
    assert text.endswith("----------------------\n")


def test_save_round_trip_keeps_frequency_not_money(tmp_path):
    path = tmp_path / "donors.dat"
    with DonorManager(path) as manager:
        manager.register("alice", "a@example.com", 123)
        manager.track_money_donation("alice", 9.0)
    reloaded = DonorManager(path)
    donor = reloaded.find_by_name("alice")
    assert donor == Donor("alice", "a@example.com", 123, 1, 0.0)


def test_save_format(tmp_path):
    path = tmp_path / "donors.dat"
    manager = DonorManager(path)
    manager.register("alice", "a@example.com", 123)
    manager.save()
    assert path.read_text() == "alice a@example.com 123 0\n"


def test_load_stops_at_bad_record(tmp_path):
    path = tmp_path / "donors.dat"
    path.write_text("alice a@example.com 1 2\nbob b@example.com x 0\ncarol c@example.com 3 0\n")
    manager = DonorManager(path)
    assert [d.name for d in manager] == ["alice"]
    assert manager.find_by_name("alice").donation_frequency == 2


def test_load_ignores_trailing_partial_record(tmp_path):
    path = tmp_path / "donors.dat"
    path.write_text("alice a@example.com 1 0\nbob b@example.com\n")
    assert [d.name for d in DonorManager(path)] == ["alice"]