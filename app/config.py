from typing import List, Optional

from pydantic_settings import BaseSettings
from urllib.parse import quote_plus

# Development-only signing secret, never used as a security boundary.
DEFAULT_JWT_SECRET = "vidyashare_secret_key_2024"


class Settings(BaseSettings):
    env: str = "local"

    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_db: str = "vidyashare"
    postgres_host: str = "localhost"
    postgres_port: str = "5432"

    # Full SQLAlchemy URL, takes precedence over the postgres_* parts
    database_override_url: Optional[str] = None

    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    token_expire_days: int = 7

    bcrypt_rounds: int = 10

    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    @property
    def database_url(self):
        if self.database_override_url:
            return self.database_override_url
        encoded_password = quote_plus(self.postgres_password)
        return (
            f"postgresql+psycopg2://{self.postgres_user}:"
            f"{encoded_password}@{self.postgres_host}:"
            f"{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "allow"


def get_settings() -> Settings:
    return Settings()
