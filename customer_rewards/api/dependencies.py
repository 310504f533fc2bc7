"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from customer_rewards.domain.service import RewardsService
from customer_rewards.infrastructure.database.repositories import CustomerRepository
from customer_rewards.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_rewards_service(db: Session = Depends(get_db)) -> RewardsService:
    """Provide a rewards service bound to the request's database session"""
    return RewardsService(CustomerRepository(db))
