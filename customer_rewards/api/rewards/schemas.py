"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError
import datetime
from decimal import Decimal
from typing import List, Optional

from customer_rewards.domain.models import Customer


class TransactionRequest(BaseModel):
    """Single transaction in the POST /api/rewards/addCustomer body"""

    amount: Optional[Decimal] = Field(None, description="Purchase amount, must be greater than zero")
    date: Optional[datetime.date] = Field(None, description="Purchase date (YYYY-MM-DD)")


class CustomerRequest(BaseModel):
    """Request body for POST /api/rewards/addCustomer"""

    customerName: Optional[str] = Field(None, validate_default=True, description="Customer name")
    transaction: Optional[List[TransactionRequest]] = Field(
        None, validate_default=True, description="Purchases to record for the customer"
    )

    @field_validator("customerName")
    @classmethod
    def name_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            raise PydanticCustomError("blank_name", "Customer name cannot be null or blank.")
        return value

    @field_validator("transaction")
    @classmethod
    def transactions_not_empty(cls, value: Optional[List[TransactionRequest]]) -> Optional[List[TransactionRequest]]:
        if not value:
            raise PydanticCustomError("empty_transactions", "Transaction list cannot be empty")
        return value


class TransactionResponse(BaseModel):
    """Persisted transaction; carries no reference back to its customer"""

    transactionId: int
    amount: float
    date: datetime.date


class CustomerResponse(BaseModel):
    """Persisted customer with its transactions"""

    customerId: int
    customerName: str
    transaction: List[TransactionResponse]

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerResponse":
        return cls(
            customerId=customer.customer_id,
            customerName=customer.customer_name,
            transaction=[
                TransactionResponse(transactionId=t.transaction_id, amount=float(t.amount), date=t.date)
                for t in customer.transactions
            ],
        )


class MonthlyRewardsSchema(BaseModel):
    """Points earned in a single month"""

    month: str
    points: int


class RewardsResponse(BaseModel):
    """Response for GET /api/rewards/calculateRewards/{customerId}"""

    model_config = ConfigDict(populate_by_name=True)

    customer_details: CustomerResponse = Field(..., alias="Customer Details")
    rewards_breakdown: List[MonthlyRewardsSchema] = Field(..., alias="Rewards Breakdown")
    total_rewards: int = Field(..., alias="Total Rewards")


class ErrorDetails(BaseModel):
    """Error body returned for domain failures"""

    statusCode: int
    message: str
    details: str
