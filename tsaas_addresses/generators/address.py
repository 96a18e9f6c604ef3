"""Synthetic Brazilian address factory backed by Faker."""

from __future__ import annotations

import logging
from typing import Any

from faker import Faker

from tsaas_addresses.config import FactoryConfig
from tsaas_addresses.exceptions import ConfigurationError
from tsaas_addresses.models.address import Address

logger = logging.getLogger(__name__)

# Locales whose Faker address provider has bairro/estado_sigla/street_prefix
SUPPORTED_LOCALES: tuple[str, ...] = ("pt_BR",)

# UF abbreviation -> IBGE state code
STATE_IBGE_CODES: dict[str, str] = {
    "RO": "11",
    "AC": "12",
    "AM": "13",
    "RR": "14",
    "PA": "15",
    "AP": "16",
    "TO": "17",
    "MA": "21",
    "PI": "22",
    "CE": "23",
    "RN": "24",
    "PB": "25",
    "PE": "26",
    "AL": "27",
    "SE": "28",
    "BA": "29",
    "MG": "31",
    "ES": "32",
    "RJ": "33",
    "SP": "35",
    "PR": "41",
    "SC": "42",
    "RS": "43",
    "MS": "50",
    "MT": "51",
    "GO": "52",
    "DF": "53",
}


class AddressFactory:
    """Generate valid, realistic Brazilian addresses.

    Uses the pt_BR Faker providers (``street_prefix``, ``bairro``,
    ``estado_sigla``...). Every generated value goes through the
    ``Address`` constructor, so it is validated and normalized like
    any caller-supplied address.

    Parameters
    ----------
    config : FactoryConfig | None
        Generation settings. Defaults to ``FactoryConfig()``.
    seed : int | None
        Random seed for reproducibility.

    Raises
    ------
    ConfigurationError
        If the configured locale is not in ``SUPPORTED_LOCALES``.
    """

    def __init__(
        self,
        config: FactoryConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self._config = config or FactoryConfig()
        if self._config.locale not in SUPPORTED_LOCALES:
            raise ConfigurationError(
                f"Unsupported locale {self._config.locale!r}, expected one of {SUPPORTED_LOCALES}"
            )
        self._fake = Faker(self._config.locale)
        if seed is not None:
            self._fake.seed_instance(seed)

    def generate(self, **overrides: Any) -> Address:
        """Generate one address.

        Parameters
        ----------
        **overrides : Any
            Field values that replace the generated ones, e.g.
            ``number=None`` or ``zip_code="01310-100"``.

        Returns
        -------
        Address
            Generated address.
        """
        fake = self._fake
        config = self._config

        state = fake.estado_sigla()
        state_ibge = STATE_IBGE_CODES.get(state)

        fields: dict[str, Any] = {
            "street": fake.last_name(),
            "district": fake.bairro(),
            "city": fake.city(),
            "state": state,
            "country": config.country,
            "country_code": config.country_code,
            "zip_code": fake.postcode(),
            "type": fake.street_prefix() if self._chance(config.type_rate) else None,
            "number": fake.building_number() if self._chance(config.number_rate) else None,
            "municipality_ibge": f"{state_ibge}{fake.numerify('#####')}" if state_ibge else None,
            "state_ibge": state_ibge,
            "complement": (
                f"Apto {fake.random_int(1, 500)}" if self._chance(config.complement_rate) else None
            ),
        }
        fields.update(overrides)
        return Address(**fields)

    def generate_batch(self, count: int) -> list[Address]:
        """Generate ``count`` addresses."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")

        addresses = [self.generate() for _ in range(count)]
        logger.info(
            "Generated %d addresses",
            len(addresses),
            extra={"extra": {"count": len(addresses), "locale": self._config.locale}},
        )
        return addresses

    def _chance(self, rate: float) -> bool:
        return self._fake.random.random() < rate
