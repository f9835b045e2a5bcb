"""Configuration management for loan-ledger."""

from dataclasses import dataclass

from loan_ledger.exceptions import ConfigurationError


@dataclass
class LedgerConfig:
    """Main configuration for loan-ledger.

    ``term_options`` and ``rate_options`` mirror the choices offered by the
    loan form. They are only enforced on creation when
    ``enforce_form_options`` is set.
    """

    due_soon_days: int = 7
    term_options: tuple[int, ...] = (6, 12, 18, 24, 36, 48)
    rate_options: tuple[int, ...] = (10, 15, 20)
    enforce_form_options: bool = False
    log_level: str = "INFO"
    log_format: str = "standard"
    locale: str = "es_ES"
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.due_soon_days < 0:
            raise ConfigurationError(f"due_soon_days must be >= 0, got {self.due_soon_days}")
        if self.log_format not in ("standard", "json"):
            raise ConfigurationError(f"Unknown log format: {self.log_format}")

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        seed = os.getenv("SEED")
        return cls(
            due_soon_days=_parse_int(os.getenv("LOAN_DUE_SOON_DAYS", "7"), "LOAN_DUE_SOON_DAYS"),
            term_options=_parse_int_list(
                os.getenv("LOAN_TERM_OPTIONS", "6,12,18,24,36,48"), "LOAN_TERM_OPTIONS"
            ),
            rate_options=_parse_int_list(os.getenv("LOAN_RATE_OPTIONS", "10,15,20"), "LOAN_RATE_OPTIONS"),
            enforce_form_options=os.getenv("LOAN_ENFORCE_FORM_OPTIONS", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            locale=os.getenv("FAKER_LOCALE", "es_ES"),
            seed=_parse_int(seed, "SEED") if seed else None,
        )


def _parse_int(value: str, name: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from exc


def _parse_int_list(value: str, name: str) -> tuple[int, ...]:
    items = [item.strip() for item in value.split(",") if item.strip()]
    if not items:
        raise ConfigurationError(f"{name} must list at least one value")
    return tuple(_parse_int(item, name) for item in items)
