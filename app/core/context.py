"""Contexto por petición que viaja explícito hacia los servicios."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RequestContext:
    user_id: str
    request_id: Optional[str] = None
