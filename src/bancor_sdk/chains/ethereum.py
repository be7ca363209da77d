"""Ethereum chain adapter backed by the Bancor converter registry."""

import logging
from typing import Any, List, Optional, Sequence

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError as ABIDecodingError
from eth_utils import function_signature_to_4byte_selector

from .base import ChainAdapter
from .rpc import JsonRpcClient
from ..core.config import BancorConfig
from ..core.exceptions import ConfigurationError, DecodingError, ValidationError
from ..core.types import BlockchainType, Pool, Token

logger = logging.getLogger(__name__)

CONVERTER_REGISTRY_NAME = b'BancorConverterRegistry'


def _selector(signature: str) -> bytes:
    return function_signature_to_4byte_selector(signature)


ADDRESS_OF = _selector('addressOf(bytes32)')
IS_SMART_TOKEN = _selector('isSmartToken(address)')
GET_CONVERTIBLE_TOKEN_SMART_TOKENS = _selector('getConvertibleTokenSmartTokens(address)')
OWNER = _selector('owner()')
CONNECTOR_TOKEN_COUNT = _selector('connectorTokenCount()')
CONNECTOR_TOKENS = _selector('connectorTokens(uint256)')


def address_bytes(address: str) -> bytes:
    """Raw 20 bytes of a hex address, any case."""
    if not isinstance(address, str) or not address.startswith('0x') or len(address) != 42:
        raise ValidationError(f'Invalid Ethereum address: {address}', field='blockchain_id', value=address)
    try:
        return bytes.fromhex(address[2:])
    except ValueError:
        raise ValidationError(f'Invalid Ethereum address: {address}', field='blockchain_id', value=address)


class EthereumAdapter(ChainAdapter):
    """Reads the pool graph from Bancor contracts through ``eth_call``.

    Pools are listed by smart token. A smart token's owner is the converter
    that is queried for reserves, so the listing id and the query id differ.
    Pool ids are lowercased like token ids, so a converter always maps to
    the same path node.
    """

    blockchain_type = BlockchainType.ETHEREUM

    def __init__(
        self,
        config: BancorConfig,
        client: Optional[JsonRpcClient] = None,
        anchor_token: Optional[Token] = None
    ):
        super().__init__(anchor_token)
        if client is None:
            if not config.ethereum_node_url:
                raise ConfigurationError("ethereum_node_url is not configured")
            client = JsonRpcClient(config.ethereum_node_url, config)
        self.config = config
        self.client = client
        self._converter_registry: Optional[str] = None

    async def close(self) -> None:
        await self.client.close()

    async def _eth_call(
        self,
        to: str,
        selector: bytes,
        output_types: Sequence[str],
        input_types: Sequence[str] = (),
        args: Sequence[Any] = ()
    ) -> tuple:
        data = selector + (encode(list(input_types), list(args)) if input_types else b'')
        result = await self.client.call('eth_call', [{'to': to, 'data': '0x' + data.hex()}, 'latest'])

        if not isinstance(result, str) or not result.startswith('0x'):
            raise DecodingError(
                f"Unexpected eth_call result from {to}: {result!r}",
                operation='eth_call',
                blockchain_type=self.blockchain_type.value
            )
        try:
            return decode(list(output_types), bytes.fromhex(result[2:]))
        except (ABIDecodingError, ValueError) as e:
            raise DecodingError(
                f"Failed to decode eth_call result from {to}: {e}",
                operation='eth_call',
                blockchain_type=self.blockchain_type.value,
                details={'result': result}
            )

    async def converter_registry(self) -> str:
        """Address of the converter registry, resolved once per adapter."""
        if self._converter_registry is None:
            (address,) = await self._eth_call(
                self.config.ethereum_contract_registry_address,
                ADDRESS_OF,
                ['address'],
                ['bytes32'],
                [CONVERTER_REGISTRY_NAME.ljust(32, b'\0')]
            )
            logger.info(f"Resolved converter registry at {address}")
            self._converter_registry = address
        return self._converter_registry

    def validate_token(self, token: Token) -> None:
        address_bytes(token.blockchain_id)

    async def list_pools(self, token: Token) -> List[Pool]:
        registry = await self.converter_registry()
        token_address = address_bytes(token.blockchain_id)

        (is_smart_token,) = await self._eth_call(
            registry, IS_SMART_TOKEN, ['bool'], ['address'], [token_address]
        )
        if is_smart_token:
            smart_tokens = [token.blockchain_id]
        else:
            (smart_tokens,) = await self._eth_call(
                registry, GET_CONVERTIBLE_TOKEN_SMART_TOKENS, ['address[]'], ['address'], [token_address]
            )

        logger.debug(f"{token.blockchain_id} has {len(smart_tokens)} smart tokens")
        return [Pool(id=smart_token.lower()) for smart_token in smart_tokens]

    async def resolve_pool_query_id(self, token: Token, pool: Pool) -> str:
        (converter,) = await self._eth_call(pool.id, OWNER, ['address'])
        return converter

    async def pool_reserves(self, pool: Pool) -> List[Token]:
        converter = pool.query_id
        if converter is None:
            (converter,) = await self._eth_call(pool.id, OWNER, ['address'])

        (count,) = await self._eth_call(converter, CONNECTOR_TOKEN_COUNT, ['uint16'])
        reserves = []
        for index in range(count):
            (address,) = await self._eth_call(
                converter, CONNECTOR_TOKENS, ['address'], ['uint256'], [index]
            )
            reserves.append(Token(blockchain_type=self.blockchain_type, blockchain_id=address))

        logger.debug(f"Converter {converter} holds {len(reserves)} reserves")
        return reserves
