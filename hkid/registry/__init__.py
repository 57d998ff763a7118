"""registry sub-package — defined HKID prefixes and their descriptions."""

from hkid.registry.prefixes import (
    DEFINED_PREFIXES,
    DEFINED_PREFIX_CODES,
    PrefixDescriptor,
    describe_prefix,
    get_prefix_descriptor,
    is_defined_prefix,
)

__all__ = [
    "DEFINED_PREFIXES",
    "DEFINED_PREFIX_CODES",
    "PrefixDescriptor",
    "describe_prefix",
    "get_prefix_descriptor",
    "is_defined_prefix",
]
