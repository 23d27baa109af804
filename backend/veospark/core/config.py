import os
from typing import Optional

from pydantic_settings import BaseSettings

from dotenv import load_dotenv
load_dotenv()


class Settings(BaseSettings):
    PROJECT_NAME: str = "Veo Spark Prompt Studio API"
    API_V1_PREFIX: str = "/api/v1"

    # For local dev the history lives in sqlite:
    # SQLALCHEMY_DATABASE_URI: str = "sqlite:///./veospark.db"
    SQLALCHEMY_DATABASE_URI: str = os.getenv(
        "DATABASE_URL", "sqlite:///./veospark.db"
    )

    # "openai" or "gemini" (Vertex AI)
    LLM_PROVIDER: str = "gemini"

    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o"

    GOOGLE_CLOUD_PROJECT_ID: Optional[str] = None
    GOOGLE_CLOUD_LOCATION: str = "us-central1"
    GEMINI_MODEL: str = "gemini-2.5-flash"

    GENERATION_TEMPERATURE: float = 0.7
    MAX_OUTPUT_TOKENS: int = 8192

    DEFAULT_LANGUAGE: str = "ko"
    # Only the most recent results are re-translated on a language switch
    TRANSLATE_RECENT_LIMIT: int = 5
    FALLBACK_NARRATION_WORDS: int = 40

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()


def get_settings() -> Settings:
    return settings
