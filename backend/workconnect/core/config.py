from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    APP_NAME: str = "WorkConnect"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    BACKEND_CORS_ORIGINS: str = (
        "http://localhost:5000,"
        "http://localhost:5173,"
        "http://127.0.0.1:5000,"
        "http://127.0.0.1:5173"
    )

    # Storage: "memory" keeps everything in-process, "sql" uses DATABASE_URL
    STORE_BACKEND: str = "memory"
    DATABASE_URL: str = "sqlite:///./workconnect.db"
    SEED_SAMPLE_DATA: bool = False

    # Sessions
    SECRET_KEY: str = "your-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    SESSION_EXPIRE_MINUTES: int = 60 * 24 * 7
    SESSION_COOKIE_NAME: str = "workconnect_session"
    SESSION_COOKIE_SECURE: bool = False

    # Password hashing
    BCRYPT_ROUNDS: int = 12


settings = Settings()
