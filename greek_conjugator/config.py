"""
Configuration for the Greek verb conjugator
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """Output and logging settings."""

    # Paths
    default_output: Path = Path("./test-output.csv")

    # Console output
    delimiter: str = ", "

    # Tabular files
    csv_delimiter: str = ","
    encoding: str = "utf-8"
    input_encoding: str = "utf-8-sig"

    # Logging
    log_level: str = "INFO"
    log_format: str = '%(asctime)s [%(levelname)s] %(message)s'


# Global config instance
config = Config()
