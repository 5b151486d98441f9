from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class SignupRequest(BaseModel):
    email: EmailStr = Field(..., description="Email address of the user")
    password: str = Field(..., min_length=6, description="Password for the user account")
    name: Optional[str] = Field(None, description="Display name stored in user metadata")


class UserInfo(BaseModel):
    id: str = Field(..., description="Identity provider user id")
    email: Optional[str] = None
    name: Optional[str] = None


class MakeAdminRequest(BaseModel):
    user_id: str = Field(..., min_length=1, description="Identity provider user id to promote")

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class AdminGrant(BaseModel):
    """Value of `admin:<userId>`."""
    is_admin: bool = True
    granted_at: str
    granted_by: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
