"""GET /api/rewards/calculateRewards/{customerId} - Monthly and total reward points"""

import time
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request

from customer_rewards.api.rewards.schemas import CustomerResponse, MonthlyRewardsSchema, RewardsResponse
from customer_rewards.api.dependencies import get_request_id, get_rewards_service
from customer_rewards.domain.exceptions import ErrorKind, RewardsError
from customer_rewards.domain.service import RewardsService
from customer_rewards.utils.date_utils import parse_iso_date
from customer_rewards.infrastructure.observability.metrics import record_calculation
from customer_rewards.infrastructure.observability.logging import log_rewards_calculation

router = APIRouter()


def _parse_date_param(name: str, value: Optional[str]):
    try:
        return parse_iso_date(value)
    except ValueError as e:
        raise RewardsError(ErrorKind.INVALID_DATE_FORMAT, f"Invalid value for {name}, expected YYYY-MM-DD") from e


@router.get("/calculateRewards/{customerId}", response_model=RewardsResponse)
def calculate_rewards(
    customerId: int,
    request: Request,
    startDate: Optional[str] = Query(None, description="Window start (YYYY-MM-DD), inclusive"),
    endDate: Optional[str] = Query(None, description="Window end (YYYY-MM-DD), inclusive"),
    service: RewardsService = Depends(get_rewards_service),
):
    """
    Calculate reward points earned by a customer within a date range.

    Flow:
    1. Parse and validate customer id and date window
    2. Load transactions in the window (404 when there are none)
    3. Group points by month in first-seen order and total them
    4. Attach the customer record (404 when it does not exist)
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        start = _parse_date_param("startDate", startDate)
        end = _parse_date_param("endDate", endDate)
        report = service.calculate_rewards(customerId, start, end)

    except RewardsError as e:
        record_calculation("not_found" if e.kind is ErrorKind.CUSTOMER_NOT_FOUND else "invalid")
        raise

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise RewardsError(ErrorKind.UNHANDLED, "Internal server error") from e

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_calculation("success", report.summary.total)
    log_rewards_calculation(request_id, customerId, report.summary.total, len(report.summary.per_month), duration_ms)

    return RewardsResponse(
        customer_details=CustomerResponse.from_domain(report.customer),
        rewards_breakdown=[
            MonthlyRewardsSchema(month=m.month, points=m.points) for m in report.summary.breakdown
        ],
        total_rewards=report.summary.total,
    )
