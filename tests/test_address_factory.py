"""Tests for AddressFactory."""

import json
import logging
import os
from unittest.mock import patch

import pytest

from tsaas_addresses.config import AddressesConfig, FactoryConfig
from tsaas_addresses.exceptions import ConfigurationError, InvalidAddressError
from tsaas_addresses.generators.address import (
    STATE_IBGE_CODES,
    SUPPORTED_LOCALES,
    AddressFactory,
)
from tsaas_addresses.logging import JsonFormatter
from tsaas_addresses.models.address import Address


class TestStateIbgeCodes:
    """Tests for the UF -> IBGE code table."""

    def test_all_states_present(self) -> None:
        """All 27 federative units are mapped."""
        assert len(STATE_IBGE_CODES) == 27
        assert STATE_IBGE_CODES["SP"] == "35"
        assert STATE_IBGE_CODES["DF"] == "53"

    def test_codes_are_two_digits(self) -> None:
        """IBGE state codes are two digits."""
        assert all(len(code) == 2 and code.isdigit() for code in STATE_IBGE_CODES.values())


class TestAddressFactory:
    """Tests for AddressFactory."""

    def test_generate_returns_address(self, seed: int) -> None:
        """generate() returns an Address instance."""
        address = AddressFactory(seed=seed).generate()
        assert isinstance(address, Address)

    def test_generated_address_is_normalized(self, seed: int) -> None:
        """Generated values satisfy the Address invariants."""
        factory = AddressFactory(seed=seed)
        for _ in range(50):
            address = factory.generate()
            assert address.street
            assert address.district
            assert address.city
            assert address.state in STATE_IBGE_CODES
            assert address.country == "Brasil"
            assert address.country_code == "BR"
            assert address.zip_code.isdigit()
            assert len(address.zip_code) == 8
            assert address.format_zip_code()[5] == "-"

    def test_ibge_codes_match_state(self, seed: int) -> None:
        """IBGE codes agree with the generated state."""
        factory = AddressFactory(seed=seed)
        for _ in range(20):
            address = factory.generate()
            assert address.state_ibge == STATE_IBGE_CODES[address.state]
            assert len(address.municipality_ibge) == 7
            assert address.municipality_ibge.startswith(address.state_ibge)

    def test_seed_reproducibility(self, seed: int) -> None:
        """Same seed produces same addresses."""
        addr1 = AddressFactory(seed=seed).generate()
        addr2 = AddressFactory(seed=seed).generate()
        assert addr1 == addr2

    def test_rates_zero_omit_optional_fields(self, seed: int) -> None:
        """Zero rates leave optional fields empty."""
        config = FactoryConfig(number_rate=0.0, complement_rate=0.0, type_rate=0.0)
        address = AddressFactory(config=config, seed=seed).generate()

        assert address.type is None
        assert address.number is None
        assert address.complement is None
        assert "S/N" in address.full_address()

    def test_rates_one_fill_optional_fields(self, seed: int) -> None:
        """Rates of one always fill optional fields."""
        config = FactoryConfig(number_rate=1.0, complement_rate=1.0, type_rate=1.0)
        address = AddressFactory(config=config, seed=seed).generate()

        assert address.type is not None
        assert address.number is not None
        assert address.complement.startswith("Apto ")

    def test_country_from_config(self, seed: int) -> None:
        """Country values come from the config and are normalized."""
        config = FactoryConfig(country="Brazil", country_code="br")
        address = AddressFactory(config=config, seed=seed).generate()

        assert address.country == "Brazil"
        assert address.country_code == "BR"

    def test_overrides(self, seed: int) -> None:
        """Overrides replace generated values."""
        address = AddressFactory(seed=seed).generate(zip_code="01310-100", number=None)

        assert address.zip_code == "01310100"
        assert address.number is None

    def test_overrides_are_validated(self, seed: int) -> None:
        """Overrides go through Address validation."""
        with pytest.raises(InvalidAddressError) as exc_info:
            AddressFactory(seed=seed).generate(city="  ")

        assert exc_info.value.property_name == "city"

    def test_generate_batch(self, seed: int) -> None:
        """generate_batch returns the requested number of addresses."""
        addresses = AddressFactory(seed=seed).generate_batch(10)

        assert len(addresses) == 10
        assert all(isinstance(a, Address) for a in addresses)

    def test_generate_batch_empty(self, seed: int) -> None:
        """A zero count gives an empty list."""
        assert AddressFactory(seed=seed).generate_batch(0) == []

    def test_generate_batch_negative(self, seed: int) -> None:
        """A negative count is rejected."""
        with pytest.raises(ValueError):
            AddressFactory(seed=seed).generate_batch(-1)


class TestFactoryLocale:
    """Tests for locale handling."""

    def test_default_locale_supported(self) -> None:
        """The default config uses a supported locale."""
        assert FactoryConfig().locale in SUPPORTED_LOCALES

    @pytest.mark.parametrize("locale", ["en_US", "pt_PT", "es_AR"])
    def test_unsupported_locale_rejected(self, locale: str) -> None:
        """Locales without Brazilian address providers are refused up front."""
        with pytest.raises(ConfigurationError, match=locale):
            AddressFactory(config=FactoryConfig(locale=locale), seed=1)

    def test_unsupported_locale_from_env(self) -> None:
        """A locale set through the environment is checked too."""
        with patch.dict(os.environ, {"ADDRESSES_LOCALE": "en_US"}):
            config = AddressesConfig.from_env()

        with pytest.raises(ConfigurationError):
            AddressFactory(config=config.factory, seed=1)


class TestFactoryLogging:
    """Tests for factory log records."""

    def test_batch_log_carries_count(self, seed: int, caplog: pytest.LogCaptureFixture) -> None:
        """The batch log record carries the count for structured output."""
        with caplog.at_level(logging.INFO, logger="tsaas_addresses.generators.address"):
            AddressFactory(seed=seed).generate_batch(3)

        records = [r for r in caplog.records if r.name == "tsaas_addresses.generators.address"]
        data = json.loads(JsonFormatter().format(records[-1]))
        assert data["message"] == "Generated 3 addresses"
        assert data["count"] == 3
        assert data["locale"] == "pt_BR"
