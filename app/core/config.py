"""Configuración central de la aplicación (Pydantic Settings).

- Carga variables desde .env en la raíz del proyecto.
- Agrupa ajustes por área: App, CORS, Mongo, Auth/JWT, Passwords, Logging.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field
from pathlib import Path

# Resuelve el .env ubicado en la raíz del proyecto (independiente del CWD)
ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    """Conjunto de variables de configuración con valores por defecto razonables.

    Nota: los valores pueden sobreescribirse vía variables de entorno (.env).
    """
    # App
    app_name: str = "Notes API"
    api_prefix: str = ""

    # CORS (por defecto se acepta cualquier origen)
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]
    cors_allow_any: bool = True

    # Mongo
    mongo_uri: str = Field(
        "mongodb://localhost:27017",
        validation_alias=AliasChoices("MONGO_URI", "MONGODB_URI"),
    )
    mongo_db: str = "notes_db"
    mongo_tls_insecure: bool = False  # allows invalid certs (dev only)
    mongo_tls_allow_invalid_hostnames: bool = False
    mongo_server_selection_timeout_ms: int = 15000
    mongo_connect_retries: int = 3
    mongo_connect_retry_delay_seconds: float = 2.0

    # Auth / JWT
    jwt_secret: str | None = Field(
        None,
        validation_alias=AliasChoices("JWT_SECRET", "ACCESS_TOKEN_SECRET"),
    )
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 24 * 60

    # Passwords (argon2id; el costo es deliberado)
    password_min_length: int = 6
    password_hash_time_cost: int = 2
    password_hash_memory_cost: int = 51200
    password_hash_parallelism: int = 2

    # Logging
    log_level: str = "INFO"

    # --- Utilidades derivadas / helpers ---
    @property
    def api_prefix_normalized(self) -> str:
        """Devuelve `api_prefix` con formato consistente.

        - Siempre inicia con '/'
        - Sin '/' final (excepto cuando es solo '/')
        - Si está vacío, devuelve ""
        """
        pref = (self.api_prefix or "").strip()
        if not pref:
            return ""
        if not pref.startswith('/'):
            pref = '/' + pref
        if len(pref) > 1 and pref.endswith('/'):
            pref = pref[:-1]
        return pref

    @property
    def jwt_configured(self) -> bool:
        return bool(self.jwt_secret)

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # no fallar si hay variables no usadas
        populate_by_name=True,
    )


def get_settings() -> Settings:
    return Settings()
