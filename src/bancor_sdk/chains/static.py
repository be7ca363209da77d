"""In-memory chain adapter over a fixed pool graph."""

from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .base import ChainAdapter
from ..core.exceptions import AdapterError
from ..core.types import BlockchainType, PathNode, Pool, Token

TokenLike = Union[Token, str]


class StaticAdapter(ChainAdapter):
    """Serves a pool graph held in memory.

    Pools are listed in the order they were added, which fixes the order in
    which the path finder explores them.
    """

    def __init__(self, blockchain_type: BlockchainType, anchor_token: Optional[Token] = None):
        self.blockchain_type = BlockchainType(blockchain_type)
        super().__init__(anchor_token)
        self._pools: Dict[str, Tuple[Pool, List[Token]]] = {}

    @classmethod
    def from_mapping(
        cls,
        blockchain_type: BlockchainType,
        pools: Mapping[str, Sequence[TokenLike]],
        anchor_token: Optional[TokenLike] = None
    ) -> 'StaticAdapter':
        """Build an adapter from ``{pool_id: [reserve, ...]}``.

        Reserves and the anchor may be given as bare ids.
        """
        blockchain_type = BlockchainType(blockchain_type)
        if isinstance(anchor_token, str):
            anchor_token = Token(blockchain_type=blockchain_type, blockchain_id=anchor_token)
        adapter = cls(blockchain_type, anchor_token)
        for pool_id, reserves in pools.items():
            adapter.add_pool(pool_id, reserves)
        return adapter

    def _as_token(self, value: TokenLike) -> Token:
        if isinstance(value, Token):
            return value
        return Token(blockchain_type=self.blockchain_type, blockchain_id=value)

    def add_pool(
        self,
        pool_id: str,
        reserves: Sequence[TokenLike],
        symbol: Optional[str] = None,
        query_id: Optional[str] = None
    ) -> Pool:
        pool = Pool(id=pool_id, symbol=symbol, query_id=query_id)
        self._pools[pool_id] = (pool, [self._as_token(reserve) for reserve in reserves])
        return pool

    async def list_pools(self, token: Token) -> List[Pool]:
        return [
            pool for pool, reserves in self._pools.values()
            if any(self.same_token(reserve, token) for reserve in reserves)
        ]

    async def resolve_pool_query_id(self, token: Token, pool: Pool) -> str:
        return pool.query_id or pool.id

    async def pool_reserves(self, pool: Pool) -> List[Token]:
        try:
            _, reserves = self._pools[pool.id]
        except KeyError:
            raise AdapterError(
                f"Unknown pool {pool.id}",
                operation='pool_reserves',
                blockchain_type=self.blockchain_type.value
            )
        return list(reserves)

    def pool_node(self, pool: Pool) -> PathNode:
        return PathNode(pool.query_id or pool.id, pool.symbol)
