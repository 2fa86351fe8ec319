from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    max_rows: int = Field(50000, description="Maximum allowed rows per update batch")
    max_columns: int = Field(200, description="Maximum allowed columns per update batch")
    max_sessions: int = Field(256, description="Maximum live chart sessions held by the registry")
    default_palette: str = Field("category10", description="Palette used when a chart sets no colorScale")
    log_level: str = Field("INFO", description="Logging level")
    cors_allow_origins: str = Field(
        "*",
        description="Origins allowed to call the API: '*', a comma-separated list, or empty to disable CORS",
    )

    model_config = SettingsConfigDict(env_prefix="CHARTSTREAM_", case_sensitive=False)

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


settings = Settings()
