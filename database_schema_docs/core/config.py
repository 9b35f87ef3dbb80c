"""Configuration for the database schema docs exporter."""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings

from .exceptions import ConfigurationError
from .schemas import ConnectionSettings


class ExitCodesConfig(BaseModel):
    """Configuration for exit codes."""

    success: int = 0
    error_connection: int = 1
    error_catalog_query: int = 2
    error_validation_failed: int = 3
    error_file_system: int = 4
    error_unexpected: int = 5


class Config(BaseSettings):
    """Main configuration class for the database schema docs exporter."""

    # Database session
    db_host: str = Field(default="localhost", description="Database server host")
    db_port: int = Field(default=5432, description="Database server port")
    db_user: str = Field(default="postgres", description="Database user")
    db_password: str = Field(..., description="Database password")
    db_name: str = Field(default="postgres", description="Database name")

    # Introspection
    target_schema: str = Field(default="public", description="Schema to document")
    relation_lookup: Literal["best_effort", "constraint"] = Field(
        default="best_effort",
        description="How referenced tables are resolved from the catalog",
    )
    include_views: bool = Field(
        default=True, description="Document views alongside base tables"
    )

    # Directory paths
    markdown_dir: Path = Field(
        default=Path("markdown_tables"), description="Path for Markdown documents"
    )
    json_dir: Path = Field(
        default=Path("json_tables"), description="Path for JSON documents"
    )

    exit_codes: ExitCodesConfig = Field(default_factory=ExitCodesConfig)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    def __init__(self, **data):
        """Initialize config with custom error handling for missing required fields."""
        try:
            # Checked against os.environ so tests that clear the environment
            # get ConfigurationError rather than a value read from .env.
            if "db_password" not in data and "DB_PASSWORD" not in os.environ:
                raise ConfigurationError(variable_name="DB_PASSWORD")

            super().__init__(**data)
        except ValidationError as e:
            for error in e.errors():
                if error["type"] == "missing":
                    field_name = error["loc"][0] if error["loc"] else "unknown"
                    env_var_name = str(field_name).upper()
                    raise ConfigurationError(
                        variable_name=env_var_name,
                    ) from e
            raise

    def connection_settings(self) -> ConnectionSettings:
        """Build the explicit connection parameters for one export run."""
        return ConnectionSettings(
            host=self.db_host,
            port=self.db_port,
            user=self.db_user,
            password=self.db_password,
            database=self.db_name,
        )


# At application import time, populate os.environ from .env (if present), then enforce presence.
load_dotenv()
config = Config()
