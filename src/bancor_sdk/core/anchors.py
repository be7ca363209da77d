"""Anchor tokens and per-family token identity rules."""

from typing import Dict, Tuple

from .types import BlockchainType, PathNode, Token
from .exceptions import ConfigurationError

BNT_BLOCKCHAIN_ID = '0x1F573D6Fb3F13d689FF844B4cE37794d79a7FF1C'

ETHEREUM_ANCHOR_TOKEN = Token(
    blockchain_type=BlockchainType.ETHEREUM,
    blockchain_id=BNT_BLOCKCHAIN_ID
)

EOS_ANCHOR_TOKEN = Token(
    blockchain_type=BlockchainType.EOS,
    blockchain_id='bntbntbntbnt',
    symbol='BNT'
)

ANCHOR_TOKENS: Dict[BlockchainType, Token] = {
    BlockchainType.ETHEREUM: ETHEREUM_ANCHOR_TOKEN,
    BlockchainType.EOS: EOS_ANCHOR_TOKEN,
}


def anchor_token_for(blockchain_type: BlockchainType) -> Token:
    """Return the anchor token of a network."""
    try:
        return ANCHOR_TOKENS[BlockchainType(blockchain_type)]
    except (KeyError, ValueError):
        raise ConfigurationError(f"No anchor token for blockchain {blockchain_type!r}")


def token_key(token: Token) -> Tuple[BlockchainType, str]:
    """Identity of a token.

    Ethereum addresses compare case-insensitively, EOS accounts exactly.
    """
    if token.blockchain_type == BlockchainType.ETHEREUM:
        return token.blockchain_type, token.blockchain_id.lower()
    return token.blockchain_type, token.blockchain_id


def same_token(a: Token, b: Token) -> bool:
    return token_key(a) == token_key(b)


def token_node(token: Token) -> PathNode:
    """Encode a token as a path node for its network family."""
    if token.blockchain_type == BlockchainType.ETHEREUM:
        return PathNode(token.blockchain_id.lower())
    return PathNode(token.blockchain_id.lower(), token.symbol)
