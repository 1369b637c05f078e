from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    APP_NAME: str = "Nutrition Tracker API"
    DATABASE_URL: str = "sqlite+aiosqlite:///./nutrition.db"
    CREATE_TABLES_ON_STARTUP: bool = True
    JWT_SECRET: str = "change-me"
    JWT_ALG: str = "HS256"
    JWT_ISSUER: str = "nutrition-tracker"
    ACCESS_TOKEN_HOURS: int = 24
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

settings = Settings()
