"""EOS chain adapter reading converter tables through the chain API."""

import logging
from typing import Any, Dict, List, Optional

from .base import ChainAdapter
from .rpc import JsonRpcClient
from ..core.config import BancorConfig
from ..core.exceptions import ConfigurationError, DecodingError, ValidationError
from ..core.types import BlockchainType, PathNode, Pool, Token

logger = logging.getLogger(__name__)

GET_TABLE_ROWS = '/v1/chain/get_table_rows'
TABLE_PAGE_SIZE = 100


def reserve_symbol(row: Dict[str, Any]) -> Optional[str]:
    """Symbol code of a reserve row.

    Rows carry either an asset balance (``"1.0000 BNT"``) or a symbol
    (``"4,BNT"``) depending on the converter version.
    """
    if isinstance(row.get('balance'), str):
        return row['balance'].split()[-1]
    for key in ('currency', 'sym', 'symbol'):
        if isinstance(row.get(key), str):
            return row[key].split(',')[-1]
    return None


class EosAdapter(ChainAdapter):
    """Reads the pool graph from Bancor converter tables on EOS.

    A relay token is its own pool. Its converter account, looked up in the
    registry or fixed for the multi-converter, is both the query id and the
    path node of the pool.
    """

    blockchain_type = BlockchainType.EOS

    def __init__(
        self,
        config: BancorConfig,
        client: Optional[JsonRpcClient] = None,
        anchor_token: Optional[Token] = None
    ):
        super().__init__(anchor_token)
        if client is None:
            if not config.eos_node_url:
                raise ConfigurationError("eos_node_url is not configured")
            client = JsonRpcClient(config.eos_node_url, config)
        self.config = config
        self.client = client

    async def close(self) -> None:
        await self.client.close()

    async def _table_rows(self, code: str, scope: str, table: str) -> List[Dict[str, Any]]:
        """All rows of a table, following ``next_key`` across pages."""
        payload = {
            'code': code,
            'scope': scope,
            'table': table,
            'json': True,
            'limit': TABLE_PAGE_SIZE
        }
        rows: List[Dict[str, Any]] = []
        while True:
            response = await self.client.post_json(payload, path=GET_TABLE_ROWS)
            if not isinstance(response, dict) or not isinstance(response.get('rows'), list):
                raise DecodingError(
                    f"Unexpected get_table_rows response for {code}/{table}: {response!r}",
                    operation='get_table_rows',
                    blockchain_type=self.blockchain_type.value
                )
            rows.extend(response['rows'])
            if not response.get('more'):
                return rows

            next_key = response.get('next_key')
            if not next_key:
                # Older nodes report ``more`` without saying where to resume.
                raise DecodingError(
                    f"Table {code}/{table} has more than {len(rows)} rows and no next_key",
                    operation='get_table_rows',
                    blockchain_type=self.blockchain_type.value,
                    details={'scope': scope, 'rows': len(rows)}
                )
            logger.debug(f"Table {code}/{table} continues at {next_key}")
            payload = dict(payload, lower_bound=next_key)

    def is_multi_converter(self, token: Token) -> bool:
        return token.blockchain_id == self.config.eos_multi_token_account

    def validate_token(self, token: Token) -> None:
        if not token.symbol:
            raise ValidationError(
                f"EOS token {token.blockchain_id} needs a symbol",
                field='symbol',
                value=token.symbol
            )

    async def list_pools(self, token: Token) -> List[Pool]:
        query_id = await self._converter_account(token)
        if query_id is None:
            logger.debug(f"No converter registered for {token.symbol}@{token.blockchain_id}")
            return []
        return [Pool(id=token.blockchain_id, symbol=token.symbol, query_id=query_id)]

    async def resolve_pool_query_id(self, token: Token, pool: Pool) -> str:
        if pool.query_id is not None:
            return pool.query_id
        query_id = await self._converter_account(token)
        if query_id is None:
            raise DecodingError(
                f"Converter for {pool.symbol}@{pool.id} disappeared from the registry",
                operation='resolve_pool_query_id',
                blockchain_type=self.blockchain_type.value
            )
        return query_id

    async def _converter_account(self, token: Token) -> Optional[str]:
        if self.is_multi_converter(token):
            return self.config.eos_multi_converter_account

        rows = await self._table_rows(self.config.eos_registry_account, token.symbol, 'converters')
        for row in rows:
            converter = row.get('converter')
            if isinstance(converter, str) and converter:
                return converter
        return None

    async def pool_reserves(self, pool: Pool) -> List[Token]:
        converter = pool.query_id or pool.id
        multi = converter == self.config.eos_multi_converter_account
        rows = await self._table_rows(converter, pool.symbol if multi else converter, 'reserves')

        reserves = []
        for row in rows:
            contract = row.get('contract')
            symbol = reserve_symbol(row)
            if not isinstance(contract, str) or not symbol:
                raise DecodingError(
                    f"Malformed reserve row in {converter}: {row!r}",
                    operation='pool_reserves',
                    blockchain_type=self.blockchain_type.value
                )
            reserves.append(Token(blockchain_type=self.blockchain_type, blockchain_id=contract, symbol=symbol))

        logger.debug(f"Converter {converter} holds {len(reserves)} reserves")
        return reserves

    def pool_node(self, pool: Pool) -> PathNode:
        return PathNode(pool.query_id or pool.id, pool.symbol)
