"""
Core module for Bancor SDK.

This module contains the fundamental types, configuration, exceptions
and anchor token definitions shared by the adapters and the path finder.
"""

from .config import BancorConfig
from .types import (
    BlockchainType,
    Token,
    PathNode,
    Pool,
    ConversionPath,
    ConversionPaths,
    ConversionPathStep,
    RPCRequest,
    RPCResponse,
    nodes_equal,
)
from .anchors import (
    BNT_BLOCKCHAIN_ID,
    ETHEREUM_ANCHOR_TOKEN,
    EOS_ANCHOR_TOKEN,
    ANCHOR_TOKENS,
    anchor_token_for,
    token_key,
    same_token,
    token_node,
)
from .exceptions import (
    BancorSDKError,
    ConfigurationError,
    ValidationError,
    AdapterError,
    RPCError,
    NetworkError,
    DecodingError,
    TimeoutError,
    RateLimitError,
)

__all__ = [
    # Configuration
    "BancorConfig",

    # Core types
    "BlockchainType",
    "Token",
    "PathNode",
    "Pool",
    "ConversionPath",
    "ConversionPaths",
    "ConversionPathStep",
    "RPCRequest",
    "RPCResponse",
    "nodes_equal",

    # Anchors and token identity
    "BNT_BLOCKCHAIN_ID",
    "ETHEREUM_ANCHOR_TOKEN",
    "EOS_ANCHOR_TOKEN",
    "ANCHOR_TOKENS",
    "anchor_token_for",
    "token_key",
    "same_token",
    "token_node",

    # Exceptions
    "BancorSDKError",
    "ConfigurationError",
    "ValidationError",
    "AdapterError",
    "RPCError",
    "NetworkError",
    "DecodingError",
    "TimeoutError",
    "RateLimitError",
]
