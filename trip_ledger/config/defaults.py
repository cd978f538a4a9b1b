"""Default configuration parameters for the trip ledger."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LedgerParams:
    """Balance, settlement and budget parameters."""
    # Settlement
    settlement_threshold: float = 0.01               # Balances below this are settled
    currency_precision: int = 2                      # Decimal places of settlement amounts

    # Balance sheet
    zero_sum_tolerance: float = 1e-6                 # Allowed drift of sum(balance)
    require_uniform_currency: bool = True            # Reject mixed-currency snapshots
    default_currency: str = "USD"

    # Budget
    progress_cap_pct: float = 100.0                  # Display clamp for progress bars
    default_category: str = "other"                  # Bucket for uncategorised spend


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    ledger: LedgerParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        ledger=LedgerParams(),
        logging=LoggingParams(),
    )
