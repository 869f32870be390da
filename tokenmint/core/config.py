"""Tool configuration loaded from environment variables."""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Fixed-point scale shared by every amount in the ledger (9 decimal places)
DENOMINATOR: int = 1_000_000_000

# Largest balance a ledger entry may accumulate (unsigned 64-bit range)
MAX_BALANCE: int = 2**64 - 1


class Settings(BaseSettings):
    """Tool settings with defaults and env var overrides."""

    # External minting program
    ledger_binary: str = "ledger"
    ledger_api_url: str = "https://alberto.app/api"
    token_id: str = "mqbh742x4s356ddaryrxaowt4wxtlocekzpufodvowrirfrqaaaaa3l"

    # Minting limits
    default_max_amount: Decimal = Decimal("100")
    jitter_low: float = 0.8
    jitter_high: float = 1.2

    # Audit files
    audit_file_prefix: str = "mint"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="TOKENMINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
