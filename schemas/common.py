from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# ----------------------------------------
# Base for wire models: snake_case in Python, camelCase on the wire
# ----------------------------------------
class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def not_blank(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Field must not be blank")
    return v


def normalize_email(v: str) -> str:
    """Emails are stored and compared lower-cased so accounts and registrations line up."""
    return not_blank(v).lower()
