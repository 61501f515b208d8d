"""
Settings - Single source of truth for simulator configuration.

Usage:
    from allotment.settings import get_settings

    settings = get_settings()
    budget = settings.fixed_budget

Values are read from ALLOTMENT_* environment variables or a .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Simulator settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="ALLOTMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Budget
    fixed_budget: float = 500_000_000_000.0  # $500B
    currency_symbol: str = "$"

    # Identity
    compound_threshold: float = 0.20  # #2 within 20% of #1 => compound archetype
    max_traits: int = 4

    # Governance style
    focused_min_services: int = 5  # Services at minimum for "Focused"
    ambitious_min_services: int = 3  # Services at tier 4 for "Ambitious"
    internationalist_share: float = 0.35  # Foreign aid share of governance
    internationalist_service_id: str = "governance"
    internationalist_sub_service_id: str = "foreign-aid"

    # Readiness
    finalize_overspend_tolerance: float = 0.01  # Currency units of overspend still accepted
    finalize_max_unallocated_share: float = 0.05  # Budget fraction that may stay unallocated
    sub_minimum_tolerance: float = 0.001  # Share slack for a sub-service to count as at minimum

    # Logging
    log_level: str = "INFO"


settings = Settings()


def get_settings() -> Settings:
    """Return the module-level settings instance."""
    return settings
