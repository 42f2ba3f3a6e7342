"""
Job Entity

Only the ownership columns needed when an HR account is deleted.
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class Job(SQLModel, table=True):
    __tablename__ = "jobs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    job_title: str = Field(max_length=100)
    company_id: Optional[UUID] = Field(default=None, foreign_key="companies.id")
    added_by: UUID = Field(foreign_key="users.id", index=True)
