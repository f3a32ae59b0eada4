from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequestDTO(BaseModel):
    username: str | None = Field(None, max_length=64)
    email: str | None = Field(None, max_length=254)
    password: str | None = None
    confirm_password: str | None = Field(None, alias="confirm-password")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LoginRequestDTO(BaseModel):
    username: str | None = None
    password: str | None = None

    model_config = ConfigDict(extra="ignore")


class RegisterSuccessDTO(BaseModel):
    success: bool = True
    message: str = "User registered successfully. Please login."


class LoginSuccessDTO(BaseModel):
    success: bool = True
    username: str
    email: str
    message: str = "Login successful"
