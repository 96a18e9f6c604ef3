"""Domain models for addresses."""

from tsaas_addresses.models.address import Address

__all__ = ["Address"]
