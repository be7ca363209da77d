"""Depth-first search from a token to its network's anchor token."""

import asyncio
import logging
from dataclasses import replace
from functools import partial
from typing import AbstractSet, Awaitable, Callable, Hashable, List, Sequence, TypeVar

from ..chains.base import ChainAdapter
from ..core.exceptions import AdapterError, BancorSDKError
from ..core.types import PathNode, Pool, Token

logger = logging.getLogger(__name__)

T = TypeVar('T')

Branch = Callable[[], Awaitable[List[PathNode]]]


async def first_in_order(branches: Sequence[Branch]) -> List[PathNode]:
    """Run branches concurrently and return the earliest-ordered non-empty result.

    Results are committed in branch order: a later branch finishing first
    never pre-empts an earlier one that is still pending. Once a branch
    wins, the remaining ones are cancelled. A failure surfaces as soon as
    every earlier branch has come back empty.
    """
    tasks = [asyncio.ensure_future(branch()) for branch in branches]
    try:
        for task in tasks:
            path = await task
            if path:
                return path
        return []
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        # Collect outcomes of discarded branches so none is left unretrieved.
        await asyncio.gather(*tasks, return_exceptions=True)


class AnchorPathFinder:
    """Finds a path from any token to the anchor of the adapter's network.

    The search is first-match: pools and reserves are explored in the order
    the adapter returns them and the first branch reaching the anchor wins,
    even if a later branch would have been shorter.

    Sequential searches expand each token at most once. Parallel searches
    only skip tokens already on the current branch: sibling branches run
    concurrently, so a token claimed by a lower-priority branch must stay
    open to a higher-priority one.
    """

    def __init__(self, adapter: ChainAdapter, parallel: bool = False):
        self.adapter = adapter
        self.parallel = parallel

    async def find_path_to_anchor(self, token: Token) -> List[PathNode]:
        """Return ``[token, pool, token, pool, ..., anchor]`` or ``[]``.

        Raises:
            AdapterError: an adapter call failed
        """
        logger.debug(f"Searching anchor path for {token.blockchain_id} on {token.blockchain_type.value}")
        seen: AbstractSet[Hashable] = frozenset() if self.parallel else set()
        path = await self._search(token, seen)
        if path:
            logger.debug(f"Anchor path for {token.blockchain_id} has {len(path)} nodes")
        else:
            logger.debug(f"No anchor path for {token.blockchain_id}")
        return path

    async def _call(self, operation: str, call: Awaitable[T]) -> T:
        try:
            return await call
        except BancorSDKError:
            raise
        except Exception as e:
            raise AdapterError(
                f"{operation} failed: {e}",
                operation=operation,
                blockchain_type=self.adapter.blockchain_type.value
            ) from e

    async def _first_match(self, branches: Sequence[Branch]) -> List[PathNode]:
        if self.parallel and len(branches) > 1:
            return await first_in_order(branches)
        for branch in branches:
            path = await branch()
            if path:
                return path
        return []

    async def _search(self, token: Token, seen: AbstractSet[Hashable]) -> List[PathNode]:
        if self.adapter.is_anchor(token):
            return [self.adapter.token_node(token)]

        key = self.adapter.token_key(token)
        if key in seen:
            return []
        if self.parallel:
            # Branch-local copy: concurrent siblings must not see each other's tokens.
            seen = seen | {key}
        else:
            seen.add(key)

        pools = await self._call('list_pools', self.adapter.list_pools(token))
        return await self._first_match([
            partial(self._search_pool, token, pool, seen) for pool in pools
        ])

    async def _search_pool(self, token: Token, pool: Pool, seen: AbstractSet[Hashable]) -> List[PathNode]:
        query_id = await self._call(
            'resolve_pool_query_id', self.adapter.resolve_pool_query_id(token, pool)
        )
        pool = replace(pool, query_id=query_id)
        reserves = await self._call('pool_reserves', self.adapter.pool_reserves(pool))

        tail = await self._first_match([
            partial(self._search, reserve, seen)
            for reserve in reserves
            if not self.adapter.same_token(reserve, token)
        ])
        if not tail:
            return []
        return [self.adapter.token_node(token), self.adapter.pool_node(pool)] + tail
