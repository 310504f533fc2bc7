"""Pytest fixtures for testing"""

import os

# Point the app's own engine at SQLite before anything imports the settings
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest
from datetime import date
from decimal import Decimal
from typing import Dict, Generator, List, Optional
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from customer_rewards.api.main import create_app
from customer_rewards.infrastructure.database.models import Base
from customer_rewards.infrastructure.database.repositories import CustomerRepository
from customer_rewards.infrastructure.database.session import get_db
from customer_rewards.domain.models import Customer, Transaction


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class InMemoryCustomerStore:
    """Dict-backed store used to exercise the service without a database"""

    def __init__(self):
        self.customers: Dict[int, Customer] = {}
        self.save_calls = 0

    def save_customer(self, customer_name: str, transactions: List[Transaction]) -> Customer:
        self.save_calls += 1
        customer_id = len(self.customers) + 1
        next_txn_id = sum(len(c.transactions) for c in self.customers.values()) + 1

        saved = [
            Transaction(amount=t.amount, date=t.date, transaction_id=next_txn_id + i, customer_id=customer_id)
            for i, t in enumerate(transactions)
        ]
        customer = Customer(customer_name=customer_name, customer_id=customer_id, transactions=saved)
        self.customers[customer_id] = customer
        return customer

    def find_transactions(self, customer_id: int, start: date, end: date) -> List[Transaction]:
        customer = self.customers.get(customer_id)
        if customer is None:
            return []
        return [t for t in customer.transactions if start <= t.date <= end]

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        return self.customers.get(customer_id)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def repository(db: Session) -> CustomerRepository:
    return CustomerRepository(db)


@pytest.fixture
def memory_store() -> InMemoryCustomerStore:
    return InMemoryCustomerStore()


@pytest.fixture
def customer_payload() -> dict:
    """Request body for a customer with a single $120 April purchase"""
    return {
        "customerName": "Sam",
        "transaction": [{"amount": 120.0, "date": "2024-04-15"}],
    }


@pytest.fixture
def sample_transactions() -> List[Transaction]:
    """Purchases spread over three months, March first"""
    return [
        Transaction(amount=Decimal("120"), date=date(2024, 3, 5)),  # 90
        Transaction(amount=Decimal("75"), date=date(2024, 1, 20)),  # 25
        Transaction(amount=Decimal("60"), date=date(2024, 3, 28)),  # 10
        Transaction(amount=Decimal("30"), date=date(2024, 2, 14)),  # 0
        Transaction(amount=Decimal("200"), date=date(2024, 1, 2)),  # 250
    ]
