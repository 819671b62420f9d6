"""
Schema definitions for admin login, user signup and user login.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from schemas.common import CamelModel, not_blank, normalize_email


# ----------------------------------------
# Admin login (POST /api/admin/login)
# ----------------------------------------
class AdminLoginSchema(BaseModel):
    password: str = Field(..., description="Shared admin password")


# ----------------------------------------
# User signup (POST /api/auth/signup)
# ----------------------------------------
class SignupSchema(CamelModel):
    name: str = Field(..., description="Full name")
    college_id: Optional[str] = Field(None, description="College / university ID")
    email: EmailStr = Field(..., description="Valid email address, used as the login")
    password: str = Field(..., min_length=1, description="Account password")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return not_blank(v)

    @field_validator("email")
    @classmethod
    def canonical_email(cls, v: str) -> str:
        return normalize_email(v)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Asha Verma",
                "collegeId": "CS-2024-117",
                "email": "asha@example.com",
                "password": "s3cret-pass",
            }
        }
    )


# ----------------------------------------
# User login (POST /api/auth/login)
# ----------------------------------------
class LoginSchema(BaseModel):
    email: str = Field(..., description="Registered email address")
    password: str = Field(..., description="Account password")

    @field_validator("email")
    @classmethod
    def canonical_email(cls, v: str) -> str:
        return normalize_email(v)


class AuthUserSchema(BaseModel):
    name: Optional[str] = None
    email: str

    model_config = {"from_attributes": True}
