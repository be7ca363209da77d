"""Unit tests for core types and anchor helpers."""

import pydantic
import pytest

from bancor_sdk.core.anchors import (
    BNT_BLOCKCHAIN_ID,
    EOS_ANCHOR_TOKEN,
    ETHEREUM_ANCHOR_TOKEN,
    anchor_token_for,
    same_token,
    token_key,
    token_node,
)
from bancor_sdk.core.exceptions import BancorSDKError, ConfigurationError, ValidationError
from bancor_sdk.core.types import BlockchainType, ConversionPath, PathNode, Token
from bancor_sdk.pathfinding.steps import path_to_steps


class TestToken:
    """Test the Token model."""

    def test_strips_whitespace(self):
        token = Token(blockchain_type="eos", blockchain_id=" eosio.token ", symbol=" EOS ")

        assert token.blockchain_type == BlockchainType.EOS
        assert token.blockchain_id == "eosio.token"
        assert token.symbol == "EOS"

    @pytest.mark.parametrize("blockchain_id", ["", "   "])
    def test_rejects_empty_id(self, blockchain_id):
        with pytest.raises(pydantic.ValidationError):
            Token(blockchain_type="ethereum", blockchain_id=blockchain_id)

    def test_rejects_empty_symbol(self):
        with pytest.raises(pydantic.ValidationError):
            Token(blockchain_type="eos", blockchain_id="eosio.token", symbol="")

    def test_rejects_unknown_blockchain(self):
        with pytest.raises(pydantic.ValidationError):
            Token(blockchain_type="bitcoin", blockchain_id="x")

    def test_is_frozen_and_hashable(self):
        token = Token(blockchain_type="ethereum", blockchain_id="0xabc")

        with pytest.raises(pydantic.ValidationError):
            token.blockchain_id = "0xdef"
        assert {token: 1}[Token(blockchain_type="ethereum", blockchain_id="0xabc")] == 1

    @pytest.mark.parametrize("data", [
        {"blockchainType": "eos", "blockchainId": "eosio.token", "symbol": "EOS"},
        {"blockchain_type": "eos", "blockchain_id": "eosio.token", "symbol": "EOS"},
    ])
    def test_from_wire(self, data):
        token = Token.from_wire(data)

        assert token == Token(blockchain_type=BlockchainType.EOS, blockchain_id="eosio.token", symbol="EOS")

    def test_to_wire(self):
        assert ETHEREUM_ANCHOR_TOKEN.to_wire() == {
            "blockchainType": "ethereum",
            "blockchainId": BNT_BLOCKCHAIN_ID,
        }
        assert EOS_ANCHOR_TOKEN.to_wire() == {
            "blockchainType": "eos",
            "blockchainId": "bntbntbntbnt",
            "symbol": "BNT",
        }


class TestPathNode:
    """Test PathNode wire forms."""

    def test_plain_node(self):
        node = PathNode("0xabc")

        assert not node.is_symbol_keyed
        assert node.to_wire() == "0xabc"
        assert PathNode.from_wire("0xabc") == node

    def test_symbol_keyed_node(self):
        node = PathNode("bntbntbntbnt", "BNT")

        assert node.is_symbol_keyed
        assert node.to_wire() == {"BNT": "bntbntbntbnt"}
        assert PathNode.from_wire({"BNT": "bntbntbntbnt"}) == node

    @pytest.mark.parametrize("value", [{}, {"A": "a", "B": "b"}, 42])
    def test_invalid_wire_node(self, value):
        with pytest.raises(ValueError):
            PathNode.from_wire(value)

    def test_conversion_path_wire(self):
        path = ConversionPath(BlockchainType.EOS, [PathNode("bntbntbntbnt", "BNT")])

        assert path.to_wire() == {"type": "eos", "path": [{"BNT": "bntbntbntbnt"}]}
        assert ConversionPath(BlockchainType.ETHEREUM).is_empty


class TestAnchors:
    """Test anchor tokens and token identity."""

    def test_anchor_token_for(self):
        assert anchor_token_for(BlockchainType.ETHEREUM) is ETHEREUM_ANCHOR_TOKEN
        assert anchor_token_for("eos") is EOS_ANCHOR_TOKEN

    def test_anchor_token_for_unknown(self):
        with pytest.raises(ConfigurationError):
            anchor_token_for("bitcoin")

    def test_ethereum_ids_compare_case_insensitively(self):
        lower = Token(blockchain_type="ethereum", blockchain_id=BNT_BLOCKCHAIN_ID.lower())

        assert token_key(lower) == token_key(ETHEREUM_ANCHOR_TOKEN)
        assert same_token(lower, ETHEREUM_ANCHOR_TOKEN)

    def test_eos_ids_compare_exactly(self):
        upper = Token(blockchain_type="eos", blockchain_id="BNTBNTBNTBNT", symbol="BNT")

        assert not same_token(upper, EOS_ANCHOR_TOKEN)

    def test_eos_identity_ignores_symbol(self):
        other = Token(blockchain_type="eos", blockchain_id="bntbntbntbnt", symbol="XYZ")

        assert same_token(other, EOS_ANCHOR_TOKEN)

    def test_networks_never_match(self):
        eth = Token(blockchain_type="ethereum", blockchain_id="bntbntbntbnt")
        eos = Token(blockchain_type="eos", blockchain_id="bntbntbntbnt", symbol="BNT")

        assert not same_token(eth, eos)

    def test_token_node(self):
        assert token_node(ETHEREUM_ANCHOR_TOKEN) == PathNode(BNT_BLOCKCHAIN_ID.lower())
        assert token_node(EOS_ANCHOR_TOKEN) == PathNode("bntbntbntbnt", "BNT")


class TestPathToSteps:
    """Test path_to_steps."""

    def test_empty(self):
        assert path_to_steps([]) == []

    def test_single_token(self):
        assert path_to_steps([PathNode("a")]) == []

    def test_even_length(self):
        with pytest.raises(ValidationError) as exc_info:
            path_to_steps([PathNode("t1"), PathNode("p1")])

        assert exc_info.value.field == "path"
        assert isinstance(exc_info.value, BancorSDKError)
