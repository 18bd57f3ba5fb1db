"""
Esquemas Pydantic para registro y login.

Los campos son opcionales a propósito: la obligatoriedad y el formato de email
se validan en `AuthService` para responder con los mensajes del contrato.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class RegisterPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    full_name: Optional[str] = Field(default=None, alias="fullName")
    email: Optional[str] = None
    password: Optional[str] = None


class LoginPayload(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class TokenResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: bool = False
    message: str
    access_token: str = Field(alias="accessToken")
