"""Conversion path generation across one or two networks."""

import asyncio
import logging
from typing import Any, Awaitable, Dict, Iterable, List, Optional, Union

import pydantic

from .anchor_finder import AnchorPathFinder
from .merger import merge_paths
from .steps import path_to_steps
from ..chains.base import ChainAdapter
from ..chains.eos import EosAdapter
from ..chains.ethereum import EthereumAdapter
from ..core.config import BancorConfig
from ..core.exceptions import ConfigurationError, ValidationError
from ..core.types import (
    BlockchainType,
    ConversionPath,
    ConversionPaths,
    ConversionPathStep,
    PathNode,
    Token,
)

logger = logging.getLogger(__name__)

TokenInput = Union[Token, Dict[str, Any]]


async def _gather_or_cancel(*calls: Awaitable) -> List[Any]:
    """Like ``asyncio.gather`` but a failure cancels the siblings."""
    tasks = [asyncio.ensure_future(call) for call in calls]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class PathGenerator:
    """Finds conversion paths between tokens.

    Each network is served by one chain adapter. Requests on a single
    network route through its anchor token; requests spanning two networks
    yield one path per network, each ending at that network's anchor.
    """

    def __init__(
        self,
        config: Optional[BancorConfig] = None,
        adapters: Optional[Iterable[ChainAdapter]] = None
    ):
        """Initialize the generator.

        Args:
            config: Bancor configuration
            adapters: Chain adapters, at most one per network
        """
        self.config = config or BancorConfig()
        self.adapters: Dict[BlockchainType, ChainAdapter] = {}
        for adapter in adapters or ():
            if adapter.blockchain_type in self.adapters:
                raise ConfigurationError(
                    f"Duplicate adapter for {adapter.blockchain_type.value}"
                )
            self.adapters[adapter.blockchain_type] = adapter
        self.finders = {
            blockchain_type: AnchorPathFinder(adapter, parallel=self.config.parallel_search)
            for blockchain_type, adapter in self.adapters.items()
        }

    @classmethod
    def from_config(cls, config: BancorConfig) -> 'PathGenerator':
        """Build a generator with an adapter for every configured node."""
        adapters: List[ChainAdapter] = []
        if config.ethereum_node_url:
            adapters.append(EthereumAdapter(config))
        if config.eos_node_url:
            adapters.append(EosAdapter(config))
        if not adapters:
            raise ConfigurationError("No blockchain node URL configured")
        return cls(config, adapters)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close every adapter, then re-raise the first failure if any."""
        results = await asyncio.gather(
            *(adapter.close() for adapter in self.adapters.values()),
            return_exceptions=True
        )
        errors = [result for result in results if isinstance(result, BaseException)]
        for error in errors:
            logger.warning(f"Failed to close adapter: {error}")
        if errors:
            raise errors[0]

    def adapter_for(self, blockchain_type: BlockchainType) -> ChainAdapter:
        try:
            return self.adapters[BlockchainType(blockchain_type)]
        except (KeyError, ValueError):
            raise ConfigurationError(f"No adapter configured for blockchain {blockchain_type!r}")

    def anchor_token(self, blockchain_type: BlockchainType) -> Token:
        return self.adapter_for(blockchain_type).anchor_of(blockchain_type)

    def _validate_token(self, token: TokenInput, name: str) -> Token:
        """Validate a token argument.

        Args:
            token: Token model or its wire dict
            name: Argument name used in errors

        Raises:
            ValidationError: Malformed token
            ConfigurationError: No adapter for the token's network
        """
        if isinstance(token, dict):
            try:
                token = Token.from_wire(token)
            except pydantic.ValidationError as e:
                raise ValidationError(f"Invalid {name}: {e}", field=name, value=token)
        if not isinstance(token, Token):
            raise ValidationError(f"Invalid {name}: {token!r}", field=name, value=token)

        self.adapter_for(token.blockchain_type).validate_token(token)
        return token

    async def find_path_to_anchor(self, token: TokenInput) -> List[PathNode]:
        """Path from ``token`` to its network's anchor, ``[]`` if none exists.

        Raises:
            ValidationError: Malformed token
            AdapterError: An adapter call failed
        """
        token = self._validate_token(token, 'token')
        return await self.finders[token.blockchain_type].find_path_to_anchor(token)

    async def _find_path(self, from_token: Token, to_token: Token) -> ConversionPath:
        finder = self.finders[from_token.blockchain_type]
        source_path, target_path = await _gather_or_cancel(
            finder.find_path_to_anchor(from_token),
            finder.find_path_to_anchor(to_token)
        )
        return ConversionPath(from_token.blockchain_type, merge_paths(source_path, target_path))

    async def get_conversion_path(
        self,
        from_token: Optional[TokenInput] = None,
        to_token: Optional[TokenInput] = None
    ) -> ConversionPath:
        """Conversion path between two tokens on the same network.

        An omitted side defaults to the anchor token of the other side's
        network, so ``(token, None)`` routes to the anchor and
        ``(None, token)`` routes from it.

        Raises:
            ValidationError: Both sides omitted, tokens on different
                networks or a malformed token
            AdapterError: An adapter call failed
        """
        if from_token is None and to_token is None:
            raise ValidationError("At least one of from_token and to_token is required")

        if from_token is not None:
            from_token = self._validate_token(from_token, 'from_token')
        if to_token is not None:
            to_token = self._validate_token(to_token, 'to_token')

        if from_token is None:
            from_token = self.anchor_token(to_token.blockchain_type)
        if to_token is None:
            to_token = self.anchor_token(from_token.blockchain_type)

        if from_token.blockchain_type != to_token.blockchain_type:
            raise ValidationError(
                "Tokens on different blockchains have no single conversion path; use generate_path",
                details={'from': from_token.blockchain_type.value, 'to': to_token.blockchain_type.value}
            )

        logger.info(
            f"Finding {from_token.blockchain_type.value} path from "
            f"{from_token.blockchain_id} to {to_token.blockchain_id}"
        )
        conversion_path = await self._find_path(from_token, to_token)
        logger.info(f"Found path with {len(conversion_path.path)} nodes")
        return conversion_path

    async def generate_path(self, source_token: TokenInput, target_token: TokenInput) -> ConversionPaths:
        """Conversion paths from ``source_token`` to ``target_token``.

        Tokens on one network yield one merged path. Tokens on two networks
        yield two paths, source to its anchor and target's anchor to target;
        the networks are not bridged. A failure on either side fails the
        whole call.

        Raises:
            ValidationError: Malformed token
            AdapterError: An adapter call failed
        """
        source_token = self._validate_token(source_token, 'source_token')
        target_token = self._validate_token(target_token, 'target_token')

        if source_token.blockchain_type == target_token.blockchain_type:
            paths = [await self.get_conversion_path(source_token, target_token)]
        else:
            logger.info(
                f"Cross-chain request {source_token.blockchain_type.value} -> "
                f"{target_token.blockchain_type.value}, generating one path per chain"
            )
            paths = await _gather_or_cancel(
                self.get_conversion_path(source_token, None),
                self.get_conversion_path(None, target_token)
            )
        return ConversionPaths(paths=list(paths))

    def get_conversion_steps(self, conversion_path: ConversionPath) -> List[ConversionPathStep]:
        """Split a conversion path into per-converter steps."""
        return path_to_steps(conversion_path)


async def generate_path(
    config: BancorConfig,
    source_token: TokenInput,
    target_token: TokenInput
) -> ConversionPaths:
    """Convenience function generating paths with adapters built from ``config``."""
    async with PathGenerator.from_config(config) as generator:
        return await generator.generate_path(source_token, target_token)


async def get_conversion_path(
    config: BancorConfig,
    from_token: Optional[TokenInput] = None,
    to_token: Optional[TokenInput] = None
) -> ConversionPath:
    """Convenience function for a single-network conversion path."""
    async with PathGenerator.from_config(config) as generator:
        return await generator.get_conversion_path(from_token, to_token)
