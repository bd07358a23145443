"""Contractor relationship and equity grant models."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class CompanyContractor(BaseModel):
    """A contractor's relationship with a company."""

    id: str
    company_id: str
    user_id: str
    company_investor_id: Optional[str] = None  # Set once the contractor holds equity
    pay_rate_in_subunits: Optional[int] = Field(default=None, ge=0)  # Default hourly rate in cents
    equity_percentage: int = Field(default=0, ge=0, le=100)
    started_at: Optional[date] = None
    ended_at: Optional[date] = None
    has_legal_details: bool = True  # Tax and compliance info confirmed by the contractor

    @property
    def is_alumni(self) -> bool:
        return self.ended_at is not None


class EquityGrant(BaseModel):
    """Equity grant issued to a company investor for a single year."""

    id: str
    company_investor_id: str
    share_price_usd: Decimal
    year: int
    vested_shares: int = 0
    unvested_shares: int = 0
    cancelled_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.cancelled_at is None

    @property
    def number_of_shares(self) -> int:
        return self.vested_shares + self.unvested_shares
