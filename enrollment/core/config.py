from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BRAND_NAME: str = "Masters English"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    INTAKE_ENABLED: bool = False
    INTAKE_ENDPOINT: str | None = None  # e.g. https://formspree.io/f/<form-id>
    INTAKE_TIMEOUT_SECONDS: float = 10.0

    SESSION_LIMIT: int = 10_000


settings = Settings()
