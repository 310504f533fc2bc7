"""POST /api/rewards/addCustomer - Register a customer with purchase history"""

import logging
from typing import Optional
from fastapi import APIRouter, Body, Depends, Request
from sqlalchemy.orm import Session

from customer_rewards.api.rewards.schemas import CustomerRequest, CustomerResponse
from customer_rewards.api.dependencies import get_request_id, get_rewards_service
from customer_rewards.infrastructure.database.session import get_db
from customer_rewards.domain.exceptions import ErrorKind, RewardsError
from customer_rewards.domain.models import Transaction
from customer_rewards.domain.service import RewardsService
from customer_rewards.infrastructure.observability.metrics import record_customer_created
from customer_rewards.infrastructure.observability.logging import log_customer_created

router = APIRouter()


@router.post("/addCustomer", response_model=CustomerResponse, status_code=201)
def add_customer(
    request: Request,
    customer: Optional[CustomerRequest] = Body(None),
    db: Session = Depends(get_db),
    service: RewardsService = Depends(get_rewards_service),
):
    """
    Persist a customer together with its transactions.

    The whole batch is rejected if any transaction lacks a date or has a
    non-positive amount; nothing is written in that case.
    """
    request_id = get_request_id(request)

    if customer is None:
        raise RewardsError(ErrorKind.INVALID_REQUEST, "Customer data is missing")

    transactions = [Transaction(amount=t.amount, date=t.date) for t in customer.transaction]

    try:
        saved = service.add_customer(customer.customerName, transactions)
    except RewardsError:
        raise
    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise RewardsError(ErrorKind.UNHANDLED, "Internal server error") from e

    record_customer_created(len(saved.transactions))
    log_customer_created(request_id, saved.customer_id, len(saved.transactions))

    return CustomerResponse.from_domain(saved)
