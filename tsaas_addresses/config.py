"""Configuration management for tsaas-addresses."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from tsaas_addresses.exceptions import ConfigurationError


@dataclass
class FactoryConfig:
    """Synthetic address generation settings."""

    locale: str = "pt_BR"
    country: str = "Brasil"
    country_code: str = "BR"
    number_rate: float = 0.9  # share of addresses with a street number
    complement_rate: float = 0.25
    type_rate: float = 1.0


@dataclass
class OutputConfig:
    """Output configuration."""

    output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class AddressesConfig:
    """Main configuration for tsaas-addresses."""

    factory: FactoryConfig = field(default_factory=FactoryConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "AddressesConfig":
        """Create config from environment variables."""
        factory = FactoryConfig(
            locale=os.getenv("ADDRESSES_LOCALE", "pt_BR"),
            country=os.getenv("ADDRESSES_COUNTRY", "Brasil"),
            country_code=os.getenv("ADDRESSES_COUNTRY_CODE", "BR"),
            number_rate=_env_rate("ADDRESSES_NUMBER_RATE", 0.9),
            complement_rate=_env_rate("ADDRESSES_COMPLEMENT_RATE", 0.25),
            type_rate=_env_rate("ADDRESSES_TYPE_RATE", 1.0),
        )

        output = OutputConfig(
            output_dir=Path(os.getenv("ADDRESSES_OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        seed = os.getenv("ADDRESSES_SEED")
        try:
            parsed_seed = int(seed) if seed else None
        except ValueError as exc:
            raise ConfigurationError(f"ADDRESSES_SEED must be an integer, got {seed!r}") from exc

        return cls(
            factory=factory,
            output=output,
            seed=parsed_seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _env_rate(name: str, default: float) -> float:
    """Read a probability in [0, 1] from the environment."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        rate = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
    if not 0.0 <= rate <= 1.0:
        raise ConfigurationError(f"{name} must be between 0 and 1, got {rate}")
    return rate
