"""Configuration management for Bancor SDK."""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class BancorConfig:
    """Configuration for Bancor SDK."""
    ethereum_node_url: Optional[str] = None
    ethereum_contract_registry_address: str = '0xf078b4ec84e5fc57c693d43f1f4a82306c9b88d6'
    eos_node_url: Optional[str] = None
    eos_registry_account: str = 'bancorcnvrtr'
    eos_multi_converter_account: str = 'bancorcnvrtr'
    eos_multi_token_account: str = 'bancorr11111'
    request_timeout: float = 30.0
    max_retries: int = 3
    retry_delay: float = 1.0
    parallel_search: bool = False

    @classmethod
    def from_env(cls) -> 'BancorConfig':
        """Load configuration from environment variables."""
        return cls(
            ethereum_node_url=os.environ.get('BANCOR_ETHEREUM_NODE_URL'),
            ethereum_contract_registry_address=os.environ.get(
                'BANCOR_ETHEREUM_CONTRACT_REGISTRY',
                '0xf078b4ec84e5fc57c693d43f1f4a82306c9b88d6'
            ),
            eos_node_url=os.environ.get('BANCOR_EOS_NODE_URL'),
            eos_registry_account=os.environ.get('BANCOR_EOS_REGISTRY_ACCOUNT', 'bancorcnvrtr'),
            eos_multi_converter_account=os.environ.get('BANCOR_EOS_MULTI_CONVERTER', 'bancorcnvrtr'),
            eos_multi_token_account=os.environ.get('BANCOR_EOS_MULTI_TOKEN', 'bancorr11111'),
            request_timeout=float(os.environ.get('REQUEST_TIMEOUT', '30.0')),
            max_retries=int(os.environ.get('MAX_RETRIES', '3')),
            retry_delay=float(os.environ.get('RETRY_DELAY', '1.0')),
            parallel_search=_env_flag('BANCOR_PARALLEL_SEARCH')
        )

    @classmethod
    def mainnet(cls) -> 'BancorConfig':
        """Mainnet configuration."""
        return cls(
            ethereum_node_url="https://cloudflare-eth.com",
            ethereum_contract_registry_address="0xf078b4ec84e5fc57c693d43f1f4a82306c9b88d6",
            eos_node_url="https://eos.greymass.com",
            eos_registry_account="bancorcnvrtr",
            eos_multi_converter_account="bancorcnvrtr",
            eos_multi_token_account="bancorr11111"
        )
