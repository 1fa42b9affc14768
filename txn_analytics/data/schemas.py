"""
Transaction record schema.

Field names follow the JSON input (camelCase aliases); attributes are snake_case.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Integer fields must fit the frame's int64 / Int64 columns
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Transaction(BaseModel):
    """One monetary transfer between two named parties.

    ``issue_id`` is ``None`` when no compliance issue was ever raised;
    ``issue_solved`` and ``issue_message`` only mean something when it is set.
    """
    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True, extra="ignore")

    id: int = Field(ge=INT64_MIN, le=INT64_MAX)
    amount: float = Field(ge=0)
    sender_full_name: str = Field(alias="senderFullName", min_length=1)
    sender_age: int = Field(alias="senderAge", ge=INT64_MIN, le=INT64_MAX)
    beneficiary_full_name: str = Field(alias="beneficiaryFullName", min_length=1)
    beneficiary_age: int = Field(alias="beneficiaryAge", ge=INT64_MIN, le=INT64_MAX)
    issue_id: Optional[int] = Field(default=None, alias="issueId", ge=INT64_MIN, le=INT64_MAX)
    issue_solved: bool = Field(default=False, alias="issueSolved")
    issue_message: Optional[str] = Field(default=None, alias="issueMessage")

    @field_validator("issue_solved", mode="before")
    @classmethod
    def _null_is_unsolved(cls, v):
        return False if v is None else v

    @property
    def has_issue(self) -> bool:
        return self.issue_id is not None

    @property
    def is_open_issue(self) -> bool:
        return self.has_issue and not self.issue_solved

    @property
    def is_solved_issue(self) -> bool:
        return self.has_issue and self.issue_solved
