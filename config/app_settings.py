# ruff: noqa: E501
import os
from typing import Annotated, Any

from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- Core Settings ---
    ENVIRONMENT: Annotated[str, Field(default="development", description="Application environment (e.g., 'development', 'staging', 'production').")]
    SITE_NAME: Annotated[str, Field(default="VibeFit", description="Public name of the application.")]

    # --- Logging ---
    LOG_LEVEL: Annotated[str, Field(default="DEBUG", description="Logging level for the application (e.g., DEBUG, INFO, WARNING).")]

    # --- Backend (hosted auth/database/storage service) ---
    SUPABASE_URL: Annotated[str, Field(default="http://localhost:54321", description="Base URL of the hosted backend project.")]
    SUPABASE_ANON_KEY: Annotated[str, Field(default="", description="Public anon key sent as the 'apikey' header on every backend request.")]
    SUPABASE_REST_URL: Annotated[str | None, Field(default=None, description="Database REST endpoint. Auto-derived from SUPABASE_URL if not set.")]
    SUPABASE_AUTH_URL: Annotated[str | None, Field(default=None, description="Auth endpoint. Auto-derived from SUPABASE_URL if not set.")]
    SUPABASE_STORAGE_URL: Annotated[str | None, Field(default=None, description="Object storage endpoint. Auto-derived from SUPABASE_URL if not set.")]
    PROFILE_PICTURES_BUCKET: Annotated[str, Field(default="profile-pictures", description="Storage bucket holding user profile pictures.")]
    USER_SEARCH_LIMIT: Annotated[int, Field(default=20, description="Maximum number of users returned by a username search.")]
    FRIEND_HISTORY_LIMIT: Annotated[int, Field(default=20, description="Maximum number of completed workouts shown for a friend.")]

    # --- LLM ---
    LLM_API_KEY: Annotated[str, Field(default="", validate_default=True, description="API key for the chat-completions provider.")]
    LLM_API_URL: Annotated[str, Field(default="", description="Optional base URL override for the chat-completions provider.")]
    AGENT_MODEL: Annotated[str, Field(default="o4-mini", description="Model used to generate workout plans.")]
    LLM_TIMEOUT: Annotated[float, Field(default=120.0, description="Timeout in seconds for a single workout generation request.")]

    # --- HTTP client ---
    API_MAX_RETRIES: Annotated[int, Field(default=3, description="Maximum number of retries for failed backend requests.")]
    API_RETRY_INITIAL_DELAY: Annotated[float, Field(default=1.0, description="Initial delay in seconds before the first retry.")]
    API_RETRY_BACKOFF_FACTOR: Annotated[float, Field(default=2.0, description="Multiplier applied to the retry delay after each attempt.")]
    API_RETRY_MAX_DELAY: Annotated[float, Field(default=10.0, description="Upper bound in seconds for a single retry delay.")]
    API_TIMEOUT: Annotated[int, Field(default=10, description="Default timeout in seconds for backend requests.")]
    API_MAX_CONNECTIONS: Annotated[int, Field(default=50, description="Maximum concurrent connections of the shared HTTP client.")]
    API_MAX_KEEPALIVE_CONNECTIONS: Annotated[int, Field(default=10, description="Maximum keep-alive connections of the shared HTTP client.")]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    @field_validator("LLM_API_KEY", mode="before")
    @classmethod
    def _populate_llm_api_key(cls, value: str | None) -> str:
        if value:
            return value
        fallback = os.environ.get("OPENAI_API_KEY")
        return fallback or ""

    def model_post_init(self, __context: Any) -> None:
        super().model_post_init(__context)
        if not self.LLM_API_KEY:
            logger.warning("LLM_API_KEY is not configured; workout generation will fail.")

    @model_validator(mode="after")
    def _compute_derived_fields(self) -> "Settings":
        base = self.SUPABASE_URL.rstrip("/")
        self.SUPABASE_URL = base
        if not self.SUPABASE_REST_URL:
            self.SUPABASE_REST_URL = f"{base}/rest/v1"
        if not self.SUPABASE_AUTH_URL:
            self.SUPABASE_AUTH_URL = f"{base}/auth/v1"
        if not self.SUPABASE_STORAGE_URL:
            self.SUPABASE_STORAGE_URL = f"{base}/storage/v1"
        return self


settings = Settings()
