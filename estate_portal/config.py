from typing import List, Literal, Optional
from pydantic import PostgresDsn, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "legal-secret-key"

class Settings(BaseSettings):
    PROJECT_NAME: str = "LegalEstate Pro"
    VERSION: str = "0.1.0"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # Used for CORS and for the portal link embedded in invitation emails
    FRONTEND_URL: str = "http://localhost:8000"

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]

    # Database
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "legal_platform"
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[str] = None

    # Auth
    JWT_SECRET: str = DEFAULT_JWT_SECRET # openssl rand -hex 32
    JWT_ALGORITHM: str = "HS256"
    LAWYER_TOKEN_EXPIRE_MINUTES: int = 60 * 24 # 24 hours
    CLIENT_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7 # 7 days
    BCRYPT_ROUNDS: int = 12

    # Email
    EMAIL_BACKEND: Literal["smtp", "console"] = "smtp"
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 587
    SMTP_USER: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    SMTP_FROM: str = "noreply@legalestatepro.com"
    SMTP_USE_TLS: bool = True
    SMTP_TIMEOUT_SECONDS: float = 30.0

    @computed_field
    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return str(PostgresDsn.build(
            scheme="postgresql+asyncpg",
            username=self.POSTGRES_USER,
            password=self.POSTGRES_PASSWORD,
            host=self.POSTGRES_SERVER,
            port=self.POSTGRES_PORT,
            path=self.POSTGRES_DB,
        ))

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env")

settings = Settings()
