"""
OneTimeCode Entity

Short-lived numeric codes for the OTP password recovery flow.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class OneTimeCode(SQLModel, table=True):
    """
    OneTimeCode entity - emailed code proving ownership of an address.

    Business Rules:
    - Only the SHA-256 hash of the code is stored
    - Expires OTP_TTL_MINUTES after creation (checked when consumed)
    - Single-use: deleted when consumed
    """

    __tablename__ = "one_time_codes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    email: str = Field(index=True, max_length=255)
    code_hash: str = Field(max_length=64)  # SHA-256 output

    # Timestamps
    created_at: datetime = Field(
        default_factory=datetime.utcnow, sa_column=Column(DateTime)
    )
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_one_time_code_hash", "code_hash"),
        Index("idx_one_time_code_expires_at", "expires_at"),
    )
