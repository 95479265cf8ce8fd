from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Timeular API
    API_KEY: str = ""
    API_SECRET: str = ""
    SECRETS_FILE: str = "./me.secret"
    TIMEULAR_API_BASE_URL: str = "https://testing.timeular.com/api/v2"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

settings = Settings()
