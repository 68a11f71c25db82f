"""Authentication related schemas."""

from pydantic import BaseModel, Field


class Token(BaseModel):
    access_token: str
    token_type: str
    role: str
    username: str = Field(..., description="Username shown in activity reports")
