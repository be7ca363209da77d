"""Chain adapter interface consumed by the path finder."""

from abc import ABC, abstractmethod
from typing import Hashable, List, Optional

from ..core.anchors import anchor_token_for, same_token, token_key, token_node
from ..core.exceptions import ConfigurationError
from ..core.types import BlockchainType, PathNode, Pool, Token


class ChainAdapter(ABC):
    """Supplies pool graph edges for one network.

    Ids returned by an adapter are opaque to the path finder: they are only
    ever compared and copied into paths, never parsed or reformatted.
    """

    blockchain_type: BlockchainType

    def __init__(self, anchor_token: Optional[Token] = None):
        self.anchor_token = anchor_token or anchor_token_for(self.blockchain_type)
        if self.anchor_token.blockchain_type != self.blockchain_type:
            raise ConfigurationError(
                f"Anchor token belongs to {self.anchor_token.blockchain_type.value}, "
                f"adapter serves {self.blockchain_type.value}"
            )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        """Release network resources held by the adapter."""

    @abstractmethod
    async def list_pools(self, token: Token) -> List[Pool]:
        """Pools holding ``token`` as a reserve, in adapter order."""

    @abstractmethod
    async def pool_reserves(self, pool: Pool) -> List[Token]:
        """Reserve tokens of a pool, in adapter order."""

    async def resolve_pool_query_id(self, token: Token, pool: Pool) -> str:
        """Id used to query ``pool`` when it differs from its listing id."""
        return pool.id

    def validate_token(self, token: Token) -> None:
        """Raise ``ValidationError`` if the token id is malformed for this network."""

    def pool_node(self, pool: Pool) -> PathNode:
        return PathNode(pool.id)

    def token_node(self, token: Token) -> PathNode:
        return token_node(token)

    def token_key(self, token: Token) -> Hashable:
        return token_key(token)

    def same_token(self, a: Token, b: Token) -> bool:
        return same_token(a, b)

    def is_anchor(self, token: Token) -> bool:
        return self.same_token(token, self.anchor_token)

    def anchor_of(self, blockchain_type: BlockchainType) -> Token:
        if BlockchainType(blockchain_type) != self.blockchain_type:
            raise ConfigurationError(
                f"{type(self).__name__} has no anchor for {BlockchainType(blockchain_type).value}"
            )
        return self.anchor_token
