# foodbank

An interactive terminal program for running a small food bank. It keeps track of:

- **Donors**: registered by name and contact details. Each donor gets a random ID from 100 to 999.
- **Recipients**: organisations that receive food and money. If they are missing at start-up, two recipients are added: "Food Bank" (ID 101) and "Shelter" (ID 102).
- **Donations**: food (type and whole kilograms) or money. Each donation is dated `DD-MM-YYYY`.
- **Food requests**: each recipient has a queue of pending requests. When food is distributed, the oldest request is met first.

## Installation

```
pip install .
```

## Usage

```
foodbank [--data-dir DIR]
```

`--data-dir` is the directory that holds the data files. The default is the current directory.

A numbered menu appears:

```
1. Register Donor
2. Create Donation
3. Donation Report
4. Distribution Report
5. Donor Report
6. Overall Summary
7. Distribution Summary
8. Donor Rankings
9. Delete Donors
10. Food Requests
11. Distributed Food
12. Clear All Recipients Data
E. Exit
```

Type a number and press Enter. Type `E` to quit. The program also quits when input ends.

- **Create Donation** asks for the donor's name, the recipient ID and the details of the donation. It then updates the totals for both the donor and the recipient.
- **Donation Report** lists donations in one of three orders:
  - by quantity, highest first;
  - by date, newest first, comparing the `DD-MM-YYYY` text as written;
  - by money amount, highest first, with food donations after money donations.

  The totals follow the list.
- **Donor Rankings** ranks donors by number of donations, by total kilograms or by total money.
- **Delete Donors** removes a donor by ID, together with that donor's donations.
- **Food Requests** adds a request to a recipient's queue.
- **Distributed Food** meets the oldest pending request and adds its kilograms to the recipient's total.
- **Clear All Recipients Data** forgets every recipient and empties `recipients.dat`.

## Data files

| File             | Contents                                                      |
|------------------|---------------------------------------------------------------|
| `donors.dat`     | one donor per line: name, contact, ID and donation count      |
| `recipients.dat` | five lines per recipient: ID, name, kg, donation count, money |
| `donations.dat`  | eight lines per donation                                      |

All three files are written when the program exits. Recipients are also saved each time a donation or a distribution changes them.

On start-up, any donation whose donor or recipient no longer exists is dropped.

## Use as a library

The same pieces can be used from Python:

```python
from foodbank.donations import Donation, process_donation
from foodbank.donors import DonorManager
from foodbank.recipients import Recipient, RecipientRegistry
from foodbank.reporting import RankingKind, Reporting, SortKey

donors = DonorManager("donors.dat")
recipients = RecipientRegistry("recipients.dat")
reporting = Reporting(donors, recipients, "donations.dat")

donors.register("Alice", "alice@example.com", 123)
recipients.add(Recipient("Food Bank", 101))

donation = Donation.food(123, "Alice", 101, "Rice", 20, "05-03-2024")
process_donation(donors, recipients, donation)
reporting.add_donation(donation)

print(reporting.donation_report(SortKey.QUANTITY))
print(reporting.donor_rankings(RankingKind.FREQUENCY))

donors.save()
reporting.save()
```

Errors are raised as exceptions:

- `process_donation` raises `DonorNotFoundError` for an unknown donor, and returns `False` for an unknown recipient.
- `RecipientRegistry.add` raises `DuplicateRecipientError` when the ID is already taken.
- `Recipient.distribute_food` raises `NoPendingRequestsError` when the recipient has no pending requests.

## Limitations

Some data does not carry over from one run to the next:

- **Donor names and contacts**: they are stored as whitespace-separated words. Use single words so that they load back correctly.
- **Money each donor has given**: this total is not saved. After a restart it starts again at zero, so money rankings cover the current run only.
- **Pending food requests**: they are kept in memory only and are lost when the program exits.

## Development

```
pip install -e .[test]
pytest
```