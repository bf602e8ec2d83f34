from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "facetforge"
    debug: bool = False

    # Used by SqlSearchEngine.from_settings()
    database_url: str = "sqlite:///facetforge.db"
    documents_table: str = "documents"

    # When True, two filter states writing the same URL parameter key
    # raise ParameterCollisionError instead of logging a warning.
    strict_url_parameters: bool = False

    default_per_page: int = 20
    max_pages: int = 10
    range_separator: str = ";"
    terms_size: int = 50


settings = Settings()


# =============================================================================
# PAGER LIMITS
# =============================================================================

# Hard ceiling for per_page regardless of configuration
MAX_PER_PAGE = 200


# =============================================================================
# METRICS
# =============================================================================

# Number of recent searches kept by get_search_metrics()
MAX_METRICS_HISTORY = 1000
