"""Schemas para endpoints de health."""
from pydantic import BaseModel


class RootOut(BaseModel):
    data: str


class PingOut(BaseModel):
    message: str


class HealthOut(BaseModel):
    ok: bool
    db: bool
