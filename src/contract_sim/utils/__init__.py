"""
Helpers for writing simulator tests.
"""

from .address import (
    ZERO_ADDRESS,
    ZERO_KEY,
    create_either_test_contract_address,
    create_either_test_user,
    encode_to_address,
    encode_to_pk,
    generate_either_pub_key_pair,
    generate_pub_key_pair,
    is_contract_address,
    is_key_or_address_zero,
    to_hex_padded,
    zero_bytes,
)
from .context import use_circuit_context, use_circuit_context_sender

__all__ = [
    "ZERO_ADDRESS",
    "ZERO_KEY",
    "create_either_test_contract_address",
    "create_either_test_user",
    "encode_to_address",
    "encode_to_pk",
    "generate_either_pub_key_pair",
    "generate_pub_key_pair",
    "is_contract_address",
    "is_key_or_address_zero",
    "to_hex_padded",
    "zero_bytes",
    "use_circuit_context",
    "use_circuit_context_sender",
]
