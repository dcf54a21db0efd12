import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

WHATSAPP_PATTERN = re.compile(r"^[+]?[\d\s-]{8,15}$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class LeadFormData(BaseModel):
    """Contact details collected before the result is unlocked."""
    name: str = Field(..., description="Respondent's name")
    whatsapp: str = Field(..., description="WhatsApp number, optionally with a leading +")
    email: Optional[str] = Field(default=None, description="Optional email address")

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value

    @field_validator("whatsapp")
    @classmethod
    def valid_whatsapp(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("WhatsApp number is required")
        if not WHATSAPP_PATTERN.match(re.sub(r"\s", "", value)):
            raise ValueError("Enter a valid phone number")
        return value.strip()

    @field_validator("email")
    @classmethod
    def valid_email(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        if not EMAIL_PATTERN.match(value):
            raise ValueError("Enter a valid email")
        return value
