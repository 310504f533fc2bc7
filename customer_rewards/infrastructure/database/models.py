"""SQLAlchemy ORM models for customers and their transactions"""

from sqlalchemy import Column, Integer, Text, Numeric, Date, DateTime, ForeignKey, Index
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


class CustomerRecord(Base):
    """Customer owning a set of transactions"""

    __tablename__ = "customer"

    customer_id = Column(Integer, primary_key=True, autoincrement=True)
    customer_name = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    transactions = relationship(
        "TransactionRecord",
        back_populates="customer",
        cascade="all, delete-orphan",
        order_by="TransactionRecord.transaction_id",
    )


class TransactionRecord(Base):
    """Single purchase; deleted together with its customer"""

    __tablename__ = "transaction"
    __table_args__ = (Index("ix_transaction_customer_date", "customer_id", "date"),)

    transaction_id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customer.customer_id", ondelete="CASCADE"), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    date = Column(Date, nullable=False)

    customer = relationship("CustomerRecord", back_populates="transactions")
