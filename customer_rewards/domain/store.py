"""Persistence contract the rewards service depends on"""

from datetime import date
from typing import List, Optional, Protocol

from customer_rewards.domain.models import Customer, Transaction


class CustomerStore(Protocol):
    """Reads and writes customers together with their transactions"""

    def save_customer(self, customer_name: str, transactions: List[Transaction]) -> Customer:
        """Persist a customer and its transactions atomically, returning them with ids assigned"""
        ...

    def find_transactions(self, customer_id: int, start: date, end: date) -> List[Transaction]:
        """Transactions of one customer dated within [start, end], in insertion order"""
        ...

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        ...
