"""Configuration management and environment variable loading."""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file (don't override existing env vars)
load_dotenv(override=False)


class Config:
    """Application configuration."""

    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    ANALYSIS_MODEL: str = os.getenv("ANALYSIS_MODEL", "gpt-4o-mini")
    # Number of entries sent to the classifier per request
    ANALYSIS_BATCH_SIZE: int = int(os.getenv("ANALYSIS_BATCH_SIZE", "200"))
    OUT_DIR: Path = Path(os.getenv("OUT_DIR", "./out")).resolve()

    # Optional word file replacing the built-in profanity list (one word per line)
    PROFANITY_LIST: str = os.getenv("PROFANITY_LIST", "")

    @classmethod
    def validate(cls) -> None:
        """Validate that required configuration is present."""
        if not cls.OPENAI_API_KEY:
            raise ValueError(
                "OPENAI_API_KEY is required. Please set it in your .env file or environment variables."
            )
        if cls.ANALYSIS_BATCH_SIZE < 1:
            raise ValueError(f"ANALYSIS_BATCH_SIZE must be at least 1, got {cls.ANALYSIS_BATCH_SIZE}")
