from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from enum import Enum
from typing import Optional
from datetime import datetime


class PermitStatusEnum(str, Enum):
    pending = "PENDING"
    verified = "VERIFIED"
    approved = "APPROVED"
    rejected = "REJECTED"


class IdTypeEnum(str, Enum):
    aadhaar = "AADHAAR"
    passport = "PASSPORT"
    voter_id = "VOTER_ID"


def _blank_to_none(value):
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _upper(value):
    value = _blank_to_none(value)
    if isinstance(value, str):
        return value.upper()
    return value


class PermitCreate(BaseModel):
    """Fields a rider submits from the dashboard form.

    Required fields are checked by the permit service, which reports all
    missing ones in a single 400.
    """
    full_name: Optional[str] = Field(None, description="Applicant's full name as on the ID")
    email: Optional[EmailStr] = Field(None, description="Contact email, also used for status lookup")
    phone: Optional[str] = Field(None, description="Contact phone number")
    destination: Optional[str] = Field(None, description="Restricted area the permit is requested for")
    id_type: Optional[IdTypeEnum] = Field(IdTypeEnum.aadhaar, description="Type of the government ID")
    id_number: Optional[str] = Field(None, description="Government ID number")
    dl_number: Optional[str] = Field(None, description="Driving licence number")
    document_path: Optional[str] = Field(None, description="Storage path returned by /upload")

    @field_validator(
        "full_name", "email", "phone", "destination", "id_number", "dl_number", "document_path",
        mode="before",
    )
    @classmethod
    def strip_strings(cls, value):
        return _blank_to_none(value)

    @field_validator("id_type", mode="before")
    @classmethod
    def normalize_id_type(cls, value):
        return _upper(value)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PermitApplication(BaseModel):
    """A stored permit application (value of `permit:<id>`)."""
    id: str
    full_name: str
    email: str
    phone: Optional[str] = None
    destination: Optional[str] = None
    id_type: IdTypeEnum = IdTypeEnum.aadhaar
    id_number: str
    dl_number: str
    document_path: Optional[str] = None
    status: PermitStatusEnum = PermitStatusEnum.pending
    admin_notes: Optional[str] = None
    submitted_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_record(self) -> dict:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


class PermitUpdate(BaseModel):
    """Reviewer-supplied changes. Applicant fields are not editable."""
    status: Optional[PermitStatusEnum] = Field(None, description="Target status")
    admin_notes: Optional[str] = Field(None, description="Reviewer annotation")

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        # Accept "approved" as well as "APPROVED"
        return _upper(value)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PermitStatusView(BaseModel):
    """Public projection returned by the status lookup."""
    id: str
    destination: Optional[str] = None
    status: PermitStatusEnum
    submitted_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PermitDocumentLink(BaseModel):
    url: str
    path: str
