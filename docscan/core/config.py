from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    app_name: str = Field("docscan", alias="APP_NAME")
    app_env: str = Field("dev", alias="APP_ENV")

    # Gemini
    google_api_key: str | None = Field(default=None, alias="GOOGLE_API_KEY")
    gemini_base_url: str = Field("https://generativelanguage.googleapis.com/v1beta", alias="GEMINI_BASE_URL")
    gemini_model: str = Field("gemini-1.5-flash-latest", alias="GEMINI_MODEL")
    gemini_temperature: float = Field(0.2, alias="GEMINI_TEMPERATURE")
    gemini_timeout_seconds: float = Field(30.0, alias="GEMINI_TIMEOUT_SECONDS")

    # Server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3000, alias="PORT")

    # CORS allowed origins (comma-separated list, "*" for any)
    cors_origins: str = Field("*", alias="CORS_ORIGINS")

    # Companion front-end, served at / when the directory exists
    static_dir: str = Field("public", alias="STATIC_DIR")

    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "populate_by_name": True}

    @property
    def generate_content_url(self) -> str:
        base = self.gemini_base_url.rstrip("/")
        return f"{base}/models/{self.gemini_model}:generateContent"

settings = Settings()
