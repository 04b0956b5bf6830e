import os

from pydantic_settings import BaseSettings

_source_path = os.path.join(os.path.dirname(__file__), "data", "country-region.json")


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Raw data source (ISO 3166 merged with UN M49)
    DATA_SOURCE_PATH: str = _source_path
    UPSTREAM_DATA_URL: str = (
        "https://raw.githubusercontent.com/lukes/ISO-3166-Countries-with-Regional-Codes/master/all/all.json"
    )
    HTTP_TIMEOUT_SECONDS: float = 30.0

    # Region extension
    ENABLE_REGIONS: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"


settings = Settings()
