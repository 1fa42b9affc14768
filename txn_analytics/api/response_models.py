"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    transactions: int
    clients: int
    source: Optional[str] = None


class ReloadResponse(BaseModel):
    status: str
    transactions: int
    source: str


class TotalAmountResponse(BaseModel):
    total_amount: float


class SenderTotalResponse(BaseModel):
    sender: str
    total_amount: float


class MaxAmountResponse(BaseModel):
    max_amount: float


class ClientCountResponse(BaseModel):
    unique_clients: int


class TopSenderResponse(BaseModel):
    sender: Optional[str] = None


class OpenIssueResponse(BaseModel):
    client: str
    has_open_issue: bool


class ClientProfileResponse(BaseModel):
    client: str
    sent_total: float
    received_total: float
    sent_count: int
    received_count: int
    share_of_total: float
    has_open_issue: bool
    open_issue_ids: list[int]


class IssueIdsResponse(BaseModel):
    issue_ids: list[int]


class IssueMessagesResponse(BaseModel):
    messages: list[Optional[str]]
