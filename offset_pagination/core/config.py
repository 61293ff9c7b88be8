from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    DATABASE_URL: str = "sqlite+pysqlite:///./customers.db"
    DB_AUTO_CREATE: bool = True

    PAGINATION_DEFAULT_LIMIT: int = 20
    PAGINATION_MIN_LIMIT: int = 1
    PAGINATION_MAX_LIMIT: int = 100
    PAGINATION_ALLOWED_LIMITS: str | None = None
    PAGINATION_QUERY_KEY: str = "page"

    LOG_LEVEL: str = "INFO"

    @property
    def allowed_limits(self) -> list[int]:
        parts = [p.strip() for p in (self.PAGINATION_ALLOWED_LIMITS or "").split(",") if p.strip()]
        limits: list[int] = []
        for p in parts:
            try:
                v = int(p)
                if v > 0:
                    limits.append(v)
            except ValueError:
                continue
        return limits


settings = Settings()
