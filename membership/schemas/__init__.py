# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request schemas — typed records validated at the HTTP boundary.
Unknown fields are rejected (extra='forbid'), never passed on to SQL.
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Record(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


def _check_email(v: Optional[str]) -> Optional[str]:
    if v is not None and ("@" not in v or v.startswith("@") or v.endswith("@")):
        raise ValueError("must be an email address")
    return v


# ── Member ──

class MemberCreate(_Record):
    Firstname: str = Field(..., min_length=1, max_length=40)
    Lastname: str = Field(..., min_length=1, max_length=40)
    Email: str = Field(..., min_length=3, max_length=60)
    Phone: Optional[str] = Field(default=None, max_length=20)
    Active: Optional[bool] = None
    Newsletter: Optional[bool] = None

    @field_validator("Email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)


class MemberUpdate(_Record):
    """Partial update model for PATCH /members/{id}."""
    Firstname: Optional[str] = Field(default=None, min_length=1, max_length=40)
    Lastname: Optional[str] = Field(default=None, min_length=1, max_length=40)
    Email: Optional[str] = Field(default=None, min_length=3, max_length=60)
    Phone: Optional[str] = Field(default=None, max_length=20)
    Active: Optional[bool] = None
    Newsletter: Optional[bool] = None

    @field_validator("Firstname", "Lastname", "Email", "Active", "Newsletter")
    @classmethod
    def not_blank(cls, v):
        if v is None:
            raise ValueError("cannot be blank")
        return v

    @field_validator("Email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        return _check_email(v)


# ── Team ──

class TeamCreate(_Record):
    Name: str = Field(..., min_length=1, max_length=60)
    Description: Optional[str] = Field(default=None, max_length=255)
    Active: Optional[bool] = None


class TeamUpdate(_Record):
    """Partial update model for PATCH /teams/{id}."""
    Name: Optional[str] = Field(default=None, min_length=1, max_length=60)
    Description: Optional[str] = Field(default=None, max_length=255)
    Active: Optional[bool] = None

    @field_validator("Name", "Active")
    @classmethod
    def not_blank(cls, v):
        if v is None:
            raise ValueError("cannot be blank")
        return v


# ── TeamMember ──

class TeamMemberCreate(_Record):
    MemberId: int = Field(..., ge=1)
    TeamId: int = Field(..., ge=1)
    JoinedOn: Optional[date] = None


class TeamMemberUpdate(_Record):
    """Partial update model for PATCH /team-members/{member_id}/{team_id}."""
    JoinedOn: Optional[date] = None
