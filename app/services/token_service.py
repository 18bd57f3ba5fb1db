"""
Creación y verificación de JWTs de acceso (PyJWT).

La llave de firma se carga una sola vez en el arranque; verificar no tiene
efectos secundarios ni consulta la base.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

import jwt as pyjwt

DEFAULT_EXPIRES = timedelta(hours=24)


class InvalidToken(Exception):
    """Firma inválida, token mal formado o expirado."""


class TokenService:
    def __init__(self, secret: str, algorithm: str = "HS256", expires: timedelta = DEFAULT_EXPIRES) -> None:
        if not secret:
            raise ValueError("jwt secret requerido")
        self._secret = secret
        self.algorithm = algorithm
        self.expires = expires

    def issue(self, user_id: str, now: Optional[datetime] = None) -> str:
        """
        Genera un JWT válido por `expires` (24 h por defecto).
        Claims: sub(user_id), iat, exp, jti.
        """
        now = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int((now + self.expires).timestamp()),
            "jti": str(uuid4()),
        }
        return pyjwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """Decodifica y valida firma/expiración. Devuelve el user_id (`sub`)."""
        try:
            payload = pyjwt.decode(
                token,
                key=self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except pyjwt.PyJWTError as e:
            raise InvalidToken(str(e)) from e
        user_id = payload.get("sub")
        if not user_id:
            raise InvalidToken("sub vacío")
        return user_id
