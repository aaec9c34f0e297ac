"""A FIFO queue of food requests in which urgent requests jump to the front."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class FoodRequest:
    """One pending request for food by a recipient."""

    recipient_id: int
    quantity: int


class RequestQueue:
    """Pending food requests, served in arrival order unless marked urgent."""

    def __init__(self) -> None:
        self._items: deque[FoodRequest] = deque()

    def enqueue(self, recipient_id: int, quantity: int, urgent: bool = False) -> FoodRequest:
        """Add a request; an urgent one is placed ahead of all others."""
        request = FoodRequest(recipient_id, quantity)
        if urgent:
            self._items.appendleft(request)
        else:
            self._items.append(request)
        return request

    def dequeue(self) -> FoodRequest:
        """Remove and return the request at the front of the queue."""
        if not self._items:
            raise IndexError("dequeue from an empty request queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[FoodRequest]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def render(self) -> str:
        """One line per pending request, front of the queue first."""
        return "".join(
            f"Request ID: {request.recipient_id} | Quantity: {request.quantity}kg\n"
            for request in self._items
        )