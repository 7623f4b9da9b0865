from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional

class ProfileUpdateRequest(BaseModel):
    rep_name: Optional[str] = Field(None, max_length=255, description="Name printed on orders")
    company: Optional[str] = Field(None, max_length=255, description="Company shown on shared orders")

    @field_validator("rep_name", "company")
    @classmethod
    def validate_not_blank(cls, v: Optional[str]):
        if v is None:
            return v
        if not v.strip():
            raise ValueError("This field cannot be empty")
        return v.strip()

class ProfileResponse(BaseModel):
    rep_name: str
    company: str

class SettingRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    key: str
    value: str
