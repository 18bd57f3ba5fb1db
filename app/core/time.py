"""Helpers de fecha/hora en UTC para timestamps persistidos."""
from datetime import datetime, timezone


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def now_iso() -> str:
    """ISO-8601 UTC con microsegundos; ordena lexicográficamente igual que cronológicamente."""
    return now_utc().strftime("%Y-%m-%dT%H:%M:%S.%fZ")
