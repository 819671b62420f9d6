import datetime
from typing import Optional
from pydantic import Field

from schemas.common import CamelModel


# ----------------------------------------
# Schema for returning a gallery Image
# ----------------------------------------
class ImageSchema(CamelModel):
    id: int
    filename: str
    url: str
    title: Optional[str] = None
    category: Optional[str] = None
    uploaded_at: datetime.datetime


# ----------------------------------------
# Metadata-only update; omitted fields are left untouched
# ----------------------------------------
class UpdateImageSchema(CamelModel):
    title: Optional[str] = Field(None, description="New title")
    category: Optional[str] = Field(None, description="New category")
