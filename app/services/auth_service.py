"""
Lógica de autenticación: registro, login y usuario actual.
"""
import logging
import re
from typing import Any, Dict

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from argon2.low_level import Type

from app.core.config import Settings
from app.core.context import RequestContext
from app.core.exceptions import InvalidCredentials, Unauthorized, ValidationError
from app.repositories.user_repo import UserRepository
from app.services.token_service import TokenService

_log = logging.getLogger("notes.auth")

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_email_valid(email: str) -> bool:
    return bool(EMAIL_RE.fullmatch(email or ""))


def build_password_hasher(settings: Settings) -> PasswordHasher:
    """argon2id con costo configurable; lento a propósito."""
    return PasswordHasher(
        time_cost=settings.password_hash_time_cost,
        memory_cost=settings.password_hash_memory_cost,
        parallelism=settings.password_hash_parallelism,
        hash_len=32,
        salt_len=16,
        type=Type.ID,
    )


class AuthService:
    def __init__(
        self,
        users: UserRepository,
        tokens: TokenService,
        hasher: PasswordHasher,
        password_min_length: int = 6,
    ) -> None:
        self.users = users
        self.tokens = tokens
        self.hasher = hasher
        self.password_min_length = password_min_length

    def hash_password(self, password: str) -> str:
        return self.hasher.hash(password)

    def verify_password(self, password: str, password_hash: str) -> bool:
        try:
            return self.hasher.verify(password_hash, password)
        except (VerificationError, InvalidHashError):
            return False

    def register(self, full_name: str | None, email: str | None, password: str | None) -> str:
        """Valida, crea el usuario y devuelve un access token."""
        if not full_name or not email or not password:
            raise ValidationError("Full Name, Email, and Password are required")
        if not is_email_valid(email):
            raise ValidationError("Invalid email format")
        if len(password) < self.password_min_length:
            raise ValidationError(f"Password must be at least {self.password_min_length} characters")

        user = self.users.create(full_name, email, self.hash_password(password))
        user_id = str(user["_id"])
        _log.info("usuario registrado user_id=%s", user_id)
        return self.tokens.issue(user_id)

    def login(self, email: str | None, password: str | None) -> str:
        if not email or not password:
            raise ValidationError("Email and Password are required")
        if not is_email_valid(email):
            raise ValidationError("Invalid email format")

        user = self.users.find_by_email(email)
        if not user or not self.verify_password(password, user.get("password_hash") or ""):
            raise InvalidCredentials()
        return self.tokens.issue(str(user["_id"]))

    def current_user(self, ctx: RequestContext) -> Dict[str, Any]:
        """Usuario del token; si ya no existe se trata como no autorizado."""
        user = self.users.get_by_id(ctx.user_id)
        if not user:
            raise Unauthorized("User not found")
        return user
