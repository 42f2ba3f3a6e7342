"""
Company Entity

Only the ownership columns needed when an HR account is deleted.
"""

from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class Company(SQLModel, table=True):
    __tablename__ = "companies"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    company_name: str = Field(unique=True, max_length=100)
    company_email: str = Field(unique=True, max_length=255)
    company_hr: UUID = Field(foreign_key="users.id", index=True)
