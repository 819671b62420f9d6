from typing import Optional
from pydantic import BaseModel, Field, field_validator

from schemas.common import not_blank


# -------------------------------
# Schema for the public contact form
# -------------------------------
class CreateMessageSchema(BaseModel):
    name: str = Field(..., description="Sender name")
    email: str = Field(..., description="Sender email")
    message: str = Field(..., description="The message text")

    @field_validator("name", "email", "message")
    @classmethod
    def required_not_blank(cls, v: str) -> str:
        return not_blank(v)

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Ravi",
                "email": "ravi@example.com",
                "message": "Is there on-site parking for the concert night?",
            }
        }
    }


# -------------------------------
# Admin view of a message, with a display-ready date
# -------------------------------
class MessageSchema(BaseModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None
    date: str
