"""Rewards service - validation and orchestration around the store"""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional

from customer_rewards.domain.aggregation import aggregate_rewards
from customer_rewards.domain.exceptions import ErrorKind, RewardsError
from customer_rewards.domain.models import Customer, RewardsReport, Transaction
from customer_rewards.domain.store import CustomerStore

logger = logging.getLogger(__name__)

# Amounts are stored as NUMERIC(12, 2); anything it cannot hold exactly is rejected
AMOUNT_QUANTUM = Decimal("0.01")
MAX_AMOUNT = Decimal("9999999999.99")


class RewardsService:
    """Entry point for creating customers and calculating their rewards"""

    def __init__(self, store: CustomerStore):
        self.store = store

    def add_customer(self, customer_name: Optional[str], transactions: Optional[List[Transaction]]) -> Customer:
        """
        Validate and persist a customer with its transaction batch.

        The batch is all-or-nothing: every transaction is checked before the
        store is touched, so one bad entry means nothing is written.

        Raises:
            RewardsError(INVALID_REQUEST): blank name or empty transaction list
            RewardsError(INVALID_TRANSACTION): missing date, amount <= 0, sub-cent
                precision or an amount beyond the stored range
        """
        logger.info("Saving customer", extra={"customer_name": customer_name})

        if customer_name is None or not customer_name.strip():
            raise RewardsError(ErrorKind.INVALID_REQUEST, "Customer name cannot be null or blank.")

        if not transactions:
            raise RewardsError(ErrorKind.INVALID_REQUEST, "Transaction list cannot be empty")

        for txn in transactions:
            if txn.date is None:
                logger.warning("Transaction date is null")
                raise RewardsError(ErrorKind.INVALID_TRANSACTION, "Transaction date cannot be null.")
            if txn.amount is None or txn.amount <= 0:
                logger.warning("Invalid transaction amount", extra={"amount": str(txn.amount)})
                raise RewardsError(ErrorKind.INVALID_TRANSACTION, "Transaction amount must be greater than zero.")
            amount = Decimal(str(txn.amount))
            if amount > MAX_AMOUNT:
                logger.warning("Transaction amount too large", extra={"amount": str(txn.amount)})
                raise RewardsError(ErrorKind.INVALID_TRANSACTION, f"Transaction amount cannot exceed {MAX_AMOUNT}.")
            if amount != amount.quantize(AMOUNT_QUANTUM):
                logger.warning("Transaction amount has sub-cent precision", extra={"amount": str(txn.amount)})
                raise RewardsError(
                    ErrorKind.INVALID_TRANSACTION, "Transaction amount cannot have more than 2 decimal places."
                )

        saved = self.store.save_customer(customer_name, transactions)

        logger.info("Customer saved", extra={"customer_id": saved.customer_id})
        return saved

    def calculate_rewards(self, customer_id: Optional[int], start: Optional[date], end: Optional[date]) -> RewardsReport:
        """
        Calculate monthly and total reward points for a customer within [start, end].

        The transaction window is checked before the customer record, so a
        customer with nothing in range is reported as not found even when the
        customer exists.

        Raises:
            RewardsError(INVALID_REQUEST): non-positive id, missing dates, start after end
            RewardsError(CUSTOMER_NOT_FOUND): no transactions in range, or unknown customer
        """
        logger.info("Calculating rewards", extra={"customer_id": customer_id})

        if customer_id is None or customer_id <= 0:
            raise RewardsError(ErrorKind.INVALID_REQUEST, "Customer ID must be a positive number.")

        if start is None or end is None:
            raise RewardsError(ErrorKind.INVALID_REQUEST, "Start date and end date cannot be null.")

        if start > end:
            raise RewardsError(ErrorKind.INVALID_REQUEST, "Start date cannot be after end date.")

        transactions = self.store.find_transactions(customer_id, start, end)
        if not transactions:
            raise RewardsError(ErrorKind.CUSTOMER_NOT_FOUND, f"No transactions found for customer ID: {customer_id}")

        summary = aggregate_rewards(transactions, start, end)

        customer = self.store.get_customer(customer_id)
        if customer is None:
            raise RewardsError(ErrorKind.CUSTOMER_NOT_FOUND, f"Customer not found for ID: {customer_id}")

        logger.info(
            "Reward calculation completed",
            extra={"customer_id": customer_id, "total_points": summary.total},
        )
        return RewardsReport(customer=customer, summary=summary)
