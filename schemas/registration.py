import datetime
from typing import List, Optional
from pydantic import Field, field_validator

from schemas.common import CamelModel, not_blank, normalize_email


# ----------------------------------------
# Schema for a public event registration
# ----------------------------------------
class CreateRegistrationSchema(CamelModel):
    name: str = Field(..., description="Participant name")
    email: str = Field(..., description="Contact email; links the registration to an account")
    college: Optional[str] = None
    university_id: Optional[str] = None
    phone: Optional[str] = None
    event: Optional[str] = Field(None, description="Event being registered for")
    interest: Optional[str] = Field(None, description="Legacy name for `event`")
    team_name: Optional[str] = None
    team_members: Optional[List[str]] = None

    @field_validator("name")
    @classmethod
    def required_not_blank(cls, v: str) -> str:
        return not_blank(v)

    @field_validator("email")
    @classmethod
    def canonical_email(cls, v: str) -> str:
        return normalize_email(v)

    @property
    def event_name(self) -> Optional[str]:
        return self.event or self.interest


# ----------------------------------------
# Schema for admin status changes
# ----------------------------------------
class UpdateRegistrationStatusSchema(CamelModel):
    status: str = Field(..., description="New status, e.g. `Attended`")

    @field_validator("status")
    @classmethod
    def status_not_blank(cls, v: str) -> str:
        return not_blank(v)


# ----------------------------------------
# Schema for returning a single Registration
# ----------------------------------------
class RegistrationSchema(CamelModel):
    id: int
    name: Optional[str] = None
    college: Optional[str] = None
    university_id: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    event: Optional[str] = None
    team_name: Optional[str] = None
    team_members: Optional[List[str]] = None
    status: str
    timestamp: datetime.datetime
