from pydantic_settings import BaseSettings, SettingsConfigDict
class Settings(BaseSettings):
    APP_ENV: str = "dev"
    DB_URL: str = "sqlite:///./pos.db"
    LOG_LEVEL: str = "INFO"
    # reference latitude for zone area; falls back to the polygon's own mean latitude
    MAP_CENTER_LAT: float | None = None
    # JSON list of {"category_id", "available", "dish_ids"} seeding the half-half rules
    HALF_HALF_RULES: str = "[]"
    TZ: str = "UTC"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
settings = Settings()
