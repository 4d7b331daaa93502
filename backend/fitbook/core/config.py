import os
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # 🧠 App Info
    PROJECT_NAME: str = "FitBook"
    ENVIRONMENT: str = "development"

    # 🗄️ Database (PostgreSQL in production, SQLite locally)
    DATABASE_URL: str = "sqlite:///./fitbook.db"

    # 🔒 Session cookie
    SESSION_KEY: str = "dev-key"
    SESSION_COOKIE: str = "sess"
    SESSION_MAX_AGE_DAYS: int = 7

    # bcrypt cost factor
    BCRYPT_ROUNDS: int = 10

    # 📊 Fallback for the admin "Open Power BI" button
    DASHBOARD_URL: str = "#"

    # 📦 Files
    STATIC_DIR: str = os.path.join(PACKAGE_DIR, "static")
    TEMPLATES_DIR: str = os.path.join(PACKAGE_DIR, "templates")

    # 🚀 Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    @property
    def session_max_age(self) -> int:
        return self.SESSION_MAX_AGE_DAYS * 24 * 60 * 60


settings = Settings()
