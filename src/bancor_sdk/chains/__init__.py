"""
Chain adapters for Bancor SDK.

Each adapter exposes the pool graph of one network to the path finder.
"""

from .base import ChainAdapter
from .rpc import JsonRpcClient
from .ethereum import EthereumAdapter
from .eos import EosAdapter
from .static import StaticAdapter

__all__ = [
    "ChainAdapter",
    "JsonRpcClient",
    "EthereumAdapter",
    "EosAdapter",
    "StaticAdapter",
]
