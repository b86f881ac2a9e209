"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
Values are validated when the settings load, so a bad environment fails early
instead of inside the first account created.
"""

from decimal import Decimal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .currency import Currency


class BankAccountConfig(BaseSettings):
    """Bank account core configuration"""

    model_config = SettingsConfigDict(
        env_prefix="BANK_ACCOUNT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Account defaults
    default_currency: str = "USD"
    default_overdraft_limit: Decimal = Field(default=Decimal("0.00"), ge=0)

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    @field_validator("default_currency")
    @classmethod
    def _known_currency(cls, value: str) -> str:
        return Currency.from_code(value).code

    @property
    def currency(self) -> Currency:
        """Resolve default_currency to a Currency"""
        return Currency.from_code(self.default_currency)


# Global configuration instance
config = BankAccountConfig()


def get_config() -> BankAccountConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankAccountConfig:
    """Reload configuration from environment"""
    global config
    config = BankAccountConfig()
    return config
