"""Integration tests for the SQLAlchemy customer repository"""

import pytest
from datetime import date
from decimal import Decimal
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from customer_rewards.domain.models import Transaction
from customer_rewards.infrastructure.database.models import CustomerRecord, TransactionRecord
from customer_rewards.infrastructure.database.repositories import CustomerRepository


def test_save_customer_sets_back_references(repository: CustomerRepository, db: Session):
    """Test customer and transactions are written with the customer's id as foreign key"""
    saved = repository.save_customer(
        "John",
        [
            Transaction(amount=Decimal("120"), date=date(2024, 1, 15)),
            Transaction(amount=Decimal("45.25"), date=date(2024, 2, 1)),
        ],
    )

    assert saved.customer_id is not None
    assert [t.amount for t in saved.transactions] == [Decimal("120"), Decimal("45.25")]
    assert all(t.customer_id == saved.customer_id for t in saved.transactions)

    rows = db.query(TransactionRecord).all()
    assert len(rows) == 2
    assert {r.customer_id for r in rows} == {saved.customer_id}


def test_save_customer_is_atomic(repository: CustomerRepository, db: Session):
    """Test a failing transaction insert leaves no customer behind"""
    with pytest.raises(IntegrityError):
        repository.save_customer(
            "John",
            [
                Transaction(amount=Decimal("120"), date=date(2024, 1, 15)),
                Transaction(amount=Decimal("60"), date=None),  # violates NOT NULL
            ],
        )

    assert db.query(CustomerRecord).count() == 0
    assert db.query(TransactionRecord).count() == 0


def test_find_transactions_inclusive_window(repository: CustomerRepository):
    """Test boundaries are included and results keep insertion order"""
    saved = repository.save_customer(
        "John",
        [
            Transaction(amount=Decimal("70"), date=date(2024, 3, 31)),
            Transaction(amount=Decimal("60"), date=date(2024, 1, 1)),
            Transaction(amount=Decimal("80"), date=date(2023, 12, 31)),
            Transaction(amount=Decimal("90"), date=date(2024, 4, 1)),
        ],
    )

    found = repository.find_transactions(saved.customer_id, date(2024, 1, 1), date(2024, 3, 31))

    assert [t.date for t in found] == [date(2024, 3, 31), date(2024, 1, 1)]


def test_find_transactions_scoped_to_customer(repository: CustomerRepository):
    """Test another customer's purchases are not returned"""
    first = repository.save_customer("John", [Transaction(amount=Decimal("70"), date=date(2024, 5, 5))])
    repository.save_customer("Jane", [Transaction(amount=Decimal("90"), date=date(2024, 5, 6))])

    found = repository.find_transactions(first.customer_id, date(2024, 1, 1), date(2024, 12, 31))

    assert len(found) == 1
    assert found[0].amount == Decimal("70")


def test_get_customer(repository: CustomerRepository):
    """Test lookup by id returns all transactions regardless of date"""
    saved = repository.save_customer(
        "John",
        [
            Transaction(amount=Decimal("70"), date=date(2020, 5, 5)),
            Transaction(amount=Decimal("90"), date=date(2024, 5, 6)),
        ],
    )

    customer = repository.get_customer(saved.customer_id)

    assert customer.customer_name == "John"
    assert len(customer.transactions) == 2
    assert repository.get_customer(saved.customer_id + 100) is None


def test_delete_customer_cascades(repository: CustomerRepository, db: Session):
    """Test removing a customer removes its transactions"""
    saved = repository.save_customer("John", [Transaction(amount=Decimal("70"), date=date(2024, 5, 5))])

    db.delete(db.get(CustomerRecord, saved.customer_id))
    db.commit()

    assert db.query(TransactionRecord).count() == 0
