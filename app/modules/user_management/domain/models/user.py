# 📄 File: app/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "user" is in the oyster review app - the name, email and handle other people see
# 🧪 Purpose (Technical Summary):
# Immutable User domain entity shared by profile lookups, friend lists and the privacy gate
# 🔗 Dependencies:
# pydantic (EmailStr requires email-validator), typing
# 🔄 Connected Modules / Calls From:
# profile.py, profile stores, profile visibility gate, profile API schemas

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class User(BaseModel):
    """
    User domain model representing a reviewer.

    Only the public identity is modelled here; credentials live with the
    identity provider that issues the bearer tokens.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(..., max_length=100)
    email: EmailStr
    username: Optional[str] = Field(default=None, max_length=50)
    profile_photo_url: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Names are displayed in headings, so blank names are rejected"""
        name = v.strip()
        if not name:
            raise ValueError("Name is required")
        return name

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower().strip()

    @property
    def handle(self) -> Optional[str]:
        """@username as shown next to the name, if the user picked one"""
        return f"@{self.username}" if self.username else None
