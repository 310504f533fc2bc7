"""Data access layer for customers and transactions"""

from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session
from customer_rewards.infrastructure.database.models import CustomerRecord, TransactionRecord
from customer_rewards.domain.models import Customer, Transaction


def _to_transaction(record: TransactionRecord) -> Transaction:
    return Transaction(
        transaction_id=record.transaction_id,
        customer_id=record.customer_id,
        amount=record.amount,
        date=record.date,
    )


def _to_customer(record: CustomerRecord) -> Customer:
    return Customer(
        customer_id=record.customer_id,
        customer_name=record.customer_name,
        transactions=[_to_transaction(t) for t in record.transactions],
    )


class CustomerRepository:
    """SQLAlchemy-backed customer store"""

    def __init__(self, db: Session):
        self.db = db

    def save_customer(self, customer_name: str, transactions: List[Transaction]) -> Customer:
        """
        Persist customer then transactions in one database transaction.

        The customer row is flushed first to obtain its id, which is then
        written as the foreign key of every transaction. Any failure rolls
        back both steps.
        """
        try:
            db_customer = CustomerRecord(customer_name=customer_name)
            self.db.add(db_customer)
            self.db.flush()  # Get ID without committing

            for txn in transactions:
                self.db.add(
                    TransactionRecord(
                        customer_id=db_customer.customer_id,
                        amount=txn.amount,
                        date=txn.date,
                    )
                )

            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(db_customer)
        return _to_customer(db_customer)

    def find_transactions(self, customer_id: int, start: date, end: date) -> List[Transaction]:
        """Fetch a customer's transactions dated within [start, end]"""
        records = (
            self.db.query(TransactionRecord)
            .filter(
                TransactionRecord.customer_id == customer_id,
                TransactionRecord.date >= start,
                TransactionRecord.date <= end,
            )
            .order_by(TransactionRecord.transaction_id)
            .all()
        )
        return [_to_transaction(r) for r in records]

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        """Fetch customer with all of its transactions"""
        record = (
            self.db.query(CustomerRecord)
            .filter(CustomerRecord.customer_id == customer_id)
            .first()
        )
        return _to_customer(record) if record else None
