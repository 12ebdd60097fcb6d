# mindvault/env.py
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Django ---
    secret_key: str = "django-insecure-change-me"
    debug: bool = False
    allowed_hosts: list[str] = ["localhost", "127.0.0.1"]
    app_base_url: str = "http://127.0.0.1:8000"
    log_level: str = "INFO"

    # --- DB (puste = SQLite) ---
    postgres_user: str | None = None
    postgres_password: str | None = None
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str | None = None

    # --- Email (SendGrid SMTP relay) ---
    sendgrid_api_key: str | None = None
    default_from_email: str = "info@mindvault.app"

    # --- Identity provider (Google OAuth) ---
    google_client_secrets_file: str | None = None
    google_redirect_uri: str = "http://127.0.0.1:8000/auth/google/callback/"

    # --- PayPal ---
    paypal_client_id: str | None = None
    paypal_plan_id: str | None = None

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def uses_postgres(self) -> bool:
        return bool(self.postgres_db and self.postgres_user)


env = EnvSettings()
