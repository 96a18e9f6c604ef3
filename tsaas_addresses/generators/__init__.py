"""Synthetic address generators."""

from tsaas_addresses.generators.address import STATE_IBGE_CODES, AddressFactory

__all__ = ["STATE_IBGE_CODES", "AddressFactory"]
