from typing import Optional
from pydantic import field_validator
from sqlmodel import SQLModel


class StudentLogin(SQLModel):
    email: Optional[str] = None
    regNo: Optional[str] = None

    @field_validator("email", "regNo", mode="before")
    @classmethod
    def strings_only(cls, value):
        # A number can never equal a sheet cell, so it counts as missing
        return value if isinstance(value, str) else None


class FacultyLogin(SQLModel):
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("email", "password", mode="before")
    @classmethod
    def strings_only(cls, value):
        return value if isinstance(value, str) else None


class LoginResult(SQLModel):
    success: bool = True
    role: Optional[str] = None
    identifier: str


class ChallengeInput(SQLModel):
    title: str
    department: str
    link: str
    date: str
