import logging
from pathlib import Path

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings

from orgfolders.environment import EnvironmentName
from settings.log import LoggingSettings

SAMPLE_DATA_PATH = Path(__file__).resolve().parent.parent / "orgfolders" / "data" / "folders.json"


class FoldersSettings(BaseSettings):
    data_path: Path = Field(alias="FOLDERS_DATA_PATH", default=SAMPLE_DATA_PATH)
    default_page_size: int = Field(alias="FOLDERS_DEFAULT_PAGE_SIZE", default=10)


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "allow"}

    environment: EnvironmentName = Field(alias="ENVIRONMENT", default=EnvironmentName.DEVELOPMENT)

    folders: FoldersSettings = Field(default_factory=FoldersSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("environment", mode="before")
    def parse_environment(cls, value: str | EnvironmentName, info: ValidationInfo) -> EnvironmentName:
        try:
            return EnvironmentName(value)
        except ValueError:
            logging.getLogger(__name__).warning(f"Invalid environment: {value}")
            return EnvironmentName.DEVELOPMENT
