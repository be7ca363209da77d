"""
Bancor SDK for Python

A Python SDK for discovering conversion paths between Bancor tokens on
Ethereum and EOS by walking the converter graph to each network's anchor token.
"""

__version__ = "0.1.0"

# Core configuration and types
from .core.config import BancorConfig
from .core.types import (
    BlockchainType,
    Token,
    PathNode,
    Pool,
    ConversionPath,
    ConversionPaths,
    ConversionPathStep,
    nodes_equal,
)
from .core.anchors import (
    ETHEREUM_ANCHOR_TOKEN,
    EOS_ANCHOR_TOKEN,
    anchor_token_for,
)

# Chain adapters
from .chains.base import ChainAdapter
from .chains.rpc import JsonRpcClient
from .chains.ethereum import EthereumAdapter
from .chains.eos import EosAdapter
from .chains.static import StaticAdapter

# Path finding
from .pathfinding.anchor_finder import AnchorPathFinder
from .pathfinding.merger import merge_paths, collapse_cycles
from .pathfinding.steps import path_to_steps
from .pathfinding.generator import PathGenerator, generate_path, get_conversion_path

# Exceptions
from .core.exceptions import (
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
    "__version__",

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
    "nodes_equal",

    # Anchors
    "ETHEREUM_ANCHOR_TOKEN",
    "EOS_ANCHOR_TOKEN",
    "anchor_token_for",

    # Chain adapters
    "ChainAdapter",
    "JsonRpcClient",
    "EthereumAdapter",
    "EosAdapter",
    "StaticAdapter",

    # Path finding
    "AnchorPathFinder",
    "merge_paths",
    "collapse_cycles",
    "path_to_steps",
    "PathGenerator",
    "generate_path",
    "get_conversion_path",

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
