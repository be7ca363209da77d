"""Core type definitions for the Bancor SDK."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Any, Union
from pydantic import BaseModel, ConfigDict, field_validator


class BlockchainType(str, Enum):
    """Blockchain families supported by the SDK."""
    ETHEREUM = "ethereum"
    EOS = "eos"


class Token(BaseModel):
    """A token on a specific blockchain."""
    blockchain_type: BlockchainType
    blockchain_id: str
    symbol: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator('blockchain_id')
    @classmethod
    def validate_blockchain_id(cls, v):
        if not isinstance(v, str) or not v.strip():
            raise ValueError(f'Invalid blockchain id: {v!r}')
        return v.strip()

    @field_validator('symbol')
    @classmethod
    def validate_symbol(cls, v):
        if v is not None:
            if not isinstance(v, str) or not v.strip():
                raise ValueError(f'Invalid token symbol: {v!r}')
            return v.strip()
        return v

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> 'Token':
        """Build a token from its wire shape.

        Accepts the camelCase keys used on the wire (``blockchainType``,
        ``blockchainId``) as well as the snake_case field names.
        """
        return cls(
            blockchain_type=data.get('blockchainType', data.get('blockchain_type')),
            blockchain_id=data.get('blockchainId', data.get('blockchain_id')),
            symbol=data.get('symbol')
        )

    def to_wire(self) -> Dict[str, str]:
        wire = {
            'blockchainType': self.blockchain_type.value,
            'blockchainId': self.blockchain_id,
        }
        if self.symbol is not None:
            wire['symbol'] = self.symbol
        return wire


@dataclass(frozen=True)
class PathNode:
    """A token or pool id stored in a conversion path.

    Plain nodes carry only an id. Symbol-keyed nodes carry a symbol as well
    and serialize as a single-key ``{symbol: id}`` mapping.
    """
    id: str
    symbol: Optional[str] = None

    @property
    def is_symbol_keyed(self) -> bool:
        return self.symbol is not None

    def to_wire(self) -> Union[str, Dict[str, str]]:
        if self.symbol is None:
            return self.id
        return {self.symbol: self.id}

    @classmethod
    def from_wire(cls, value: Union[str, Dict[str, str]]) -> 'PathNode':
        if isinstance(value, str):
            return cls(value)
        if isinstance(value, dict) and len(value) == 1:
            (symbol, node_id), = value.items()
            return cls(node_id, symbol)
        raise ValueError(f'Invalid path node: {value!r}')


def nodes_equal(a: PathNode, b: PathNode) -> bool:
    """Value equality of two path nodes, including their tag."""
    return a.id == b.id and a.symbol == b.symbol


@dataclass(frozen=True)
class Pool:
    """A liquidity pool as listed by a chain adapter."""
    id: str
    symbol: Optional[str] = None
    query_id: Optional[str] = None


@dataclass
class ConversionPath:
    """A merged route between two tokens on one network."""
    blockchain_type: BlockchainType
    path: List[PathNode] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.path

    def to_wire(self) -> Dict[str, Any]:
        return {
            'type': self.blockchain_type.value,
            'path': [node.to_wire() for node in self.path]
        }


@dataclass
class ConversionPaths:
    """One path for a same-network request, two for a cross-network one."""
    paths: List[ConversionPath] = field(default_factory=list)

    def to_wire(self) -> Dict[str, Any]:
        return {'paths': [path.to_wire() for path in self.paths]}


@dataclass(frozen=True)
class ConversionPathStep:
    """A single hop of a conversion path through one converter."""
    converter: PathNode
    from_token: PathNode
    to_token: PathNode

    def to_wire(self) -> Dict[str, Any]:
        return {
            'converterBlockchainId': self.converter.to_wire(),
            'fromToken': self.from_token.to_wire(),
            'toToken': self.to_token.to_wire()
        }


class RPCRequest(BaseModel):
    """JSON-RPC request structure."""
    jsonrpc: str = "2.0"
    id: Union[str, int] = 1
    method: str
    params: List[Any]


class RPCResponse(BaseModel):
    """JSON-RPC response structure."""
    jsonrpc: str
    id: Union[str, int]
    result: Optional[Any] = None
    error: Optional[Dict[str, Any]] = None
