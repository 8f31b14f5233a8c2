"""
Application settings

Values come from the environment or a local .env file.
Supabase credentials are only checked when the store client is first used,
so the app can be imported (and tested) without them.
"""
import json
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    API_TITLE: str = "Backoffice Credit API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Multi-tenant API for businesses, customers, products, balances and purchases"

    # Supabase (service role bypasses RLS; tenant isolation is enforced by every query)
    SUPABASE_URL: str = ""
    SUPABASE_SERVICE_ROLE_KEY: str = ""

    # Tenant used when a request carries no x-business-id header
    DEFAULT_BUSINESS_ID: Optional[str] = None

    LOG_LEVEL: str = "INFO"

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:3000,https://yourdomain.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:3000"]

        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]


settings = Settings()
