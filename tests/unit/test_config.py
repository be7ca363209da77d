"""Unit tests for BancorConfig."""

import dataclasses

import pytest

from bancor_sdk.core.config import BancorConfig

ENV_VARS = [
    "BANCOR_ETHEREUM_NODE_URL",
    "BANCOR_ETHEREUM_CONTRACT_REGISTRY",
    "BANCOR_EOS_NODE_URL",
    "BANCOR_EOS_REGISTRY_ACCOUNT",
    "BANCOR_EOS_MULTI_CONVERTER",
    "BANCOR_EOS_MULTI_TOKEN",
    "REQUEST_TIMEOUT",
    "MAX_RETRIES",
    "RETRY_DELAY",
    "BANCOR_PARALLEL_SEARCH",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestBancorConfig:
    """Test BancorConfig."""

    def test_defaults(self):
        config = BancorConfig()

        assert config.ethereum_node_url is None
        assert config.eos_node_url is None
        assert config.eos_registry_account == "bancorcnvrtr"
        assert config.eos_multi_token_account == "bancorr11111"
        assert config.max_retries == 3
        assert config.parallel_search is False

    def test_frozen(self):
        config = BancorConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_retries = 10

    def test_from_env_defaults(self, clean_env):
        assert BancorConfig.from_env() == BancorConfig()

    def test_from_env(self, clean_env):
        clean_env.setenv("BANCOR_ETHEREUM_NODE_URL", "https://eth.example.invalid")
        clean_env.setenv("BANCOR_EOS_NODE_URL", "https://eos.example.invalid")
        clean_env.setenv("BANCOR_EOS_MULTI_TOKEN", "relaytokens1")
        clean_env.setenv("REQUEST_TIMEOUT", "12.5")
        clean_env.setenv("MAX_RETRIES", "5")
        clean_env.setenv("BANCOR_PARALLEL_SEARCH", "yes")

        config = BancorConfig.from_env()

        assert config.ethereum_node_url == "https://eth.example.invalid"
        assert config.eos_node_url == "https://eos.example.invalid"
        assert config.eos_multi_token_account == "relaytokens1"
        assert config.request_timeout == 12.5
        assert config.max_retries == 5
        assert config.parallel_search is True

    @pytest.mark.parametrize("value, expected", [
        ("1", True),
        ("TRUE", True),
        ("on", True),
        ("0", False),
        ("no", False),
        ("", False),
    ])
    def test_parallel_search_flag(self, clean_env, value, expected):
        clean_env.setenv("BANCOR_PARALLEL_SEARCH", value)

        assert BancorConfig.from_env().parallel_search is expected

    def test_mainnet(self):
        config = BancorConfig.mainnet()

        assert config.ethereum_node_url.startswith("https://")
        assert config.eos_node_url.startswith("https://")
        assert config.ethereum_contract_registry_address == BancorConfig().ethereum_contract_registry_address
