"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service runs out of the box on port 8000 against the bundled winners
file.  In a production deployment you should at least override the
access token via ``WINNERS_ACCESS_TOKEN``.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "World Cup Winners API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Static shared secret expected in the ``X-ACCESS-TOKEN`` header of
    # write requests.  There is exactly one token for the whole process.
    access_token: str = os.getenv("WINNERS_ACCESS_TOKEN", "a1b2c3d4e5f6a7b8c9d0")

    # Path of the JSON file holding the winners list.  A relative path is
    # resolved against the ``world_cup_api`` package directory by
    # ``get_data_file_path``.
    data_file: str = os.getenv("WINNERS_DATA_FILE", "data/winners.json")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


def get_data_file_path(data_file: Optional[str] = None) -> str:
    """Compute the path to the winners JSON file.

    If ``data_file`` (or ``settings.data_file`` when omitted) is an
    absolute path, use it directly.  Otherwise resolve it relative to
    the package root.
    """
    data_file = data_file or settings.data_file
    if os.path.isabs(data_file):
        return data_file
    base_dir = Path(__file__).resolve().parent.parent.parent  # world_cup_api/
    return str((base_dir / data_file).resolve())


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
