#!/usr/bin/env python3
"""
Path Generation Example

This example demonstrates:
- Paths through an in-memory pool graph
- Cross-chain requests returning one path per chain
- Splitting a path into converter steps
- Live lookups against Ethereum and EOS nodes

Requirements:
- Network access to an Ethereum and/or EOS node for the live example
"""

import asyncio
import logging
import os
from pathlib import Path
import sys

# Add the src directory to the path so we can import the SDK modules
project_dir = Path(__file__).parent.parent
src_dir = project_dir / "src"
sys.path.insert(0, str(src_dir))

from bancor_sdk.core.anchors import EOS_ANCHOR_TOKEN
from bancor_sdk.core.config import BancorConfig
from bancor_sdk.core.exceptions import AdapterError, BancorSDKError, ValidationError
from bancor_sdk.core.types import BlockchainType, Token
from bancor_sdk.chains.static import StaticAdapter
from bancor_sdk.pathfinding.generator import PathGenerator, generate_path

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

DAI = "0x6b175474e89094c44da98b954eedeac495271d0f"
LINK = "0x514910771af9ca656af840dff83e8264ecf986ca"
BNT = "0x1f573d6fb3f13d689ff844b4ce37794d79a7ff1c"


def build_offline_generator() -> PathGenerator:
    """A generator over a small hand-made pool graph."""
    ethereum = StaticAdapter.from_mapping(
        BlockchainType.ETHEREUM,
        {
            "0xdai-bnt-pool": [DAI, BNT],
            "0xlink-bnt-pool": [LINK, BNT],
        }
    )
    eos = StaticAdapter(BlockchainType.EOS)
    eos.add_pool(
        "bnt2eoscnvrt",
        [Token(blockchain_type="eos", blockchain_id="eosio.token", symbol="EOS"), EOS_ANCHOR_TOKEN],
        symbol="BNTEOS"
    )
    return PathGenerator(BancorConfig(), [ethereum, eos])


async def example_offline_paths():
    """Demonstrate path generation without any network access."""
    print("\n=== Offline Path Generation Example ===")

    generator = build_offline_generator()
    dai = Token(blockchain_type="ethereum", blockchain_id=DAI)
    link = Token(blockchain_type="ethereum", blockchain_id=LINK)

    result = await generator.generate_path(dai, link)
    print(f"DAI -> LINK: {result.to_wire()}")

    for i, step in enumerate(generator.get_conversion_steps(result.paths[0])):
        print(f"  Step {i+1}: {step.from_token.id} -> {step.to_token.id} via {step.converter.id}")

    # Cross-chain requests are answered with one path per chain
    eos_token = {"blockchainType": "eos", "blockchainId": "eosio.token", "symbol": "EOS"}
    result = await generator.generate_path(dai, eos_token)
    for path in result.paths:
        print(f"  {path.blockchain_type.value}: {path.to_wire()['path']}")


async def example_error_handling():
    """Demonstrate validation errors."""
    print("\n=== Error Handling Example ===")

    generator = build_offline_generator()

    try:
        await generator.get_conversion_path(None, None)
    except ValidationError as e:
        print(f"✅ Caught missing tokens: {e}")

    try:
        await generator.generate_path(
            {"blockchainType": "ethereum", "blockchainId": ""},
            {"blockchainType": "ethereum", "blockchainId": LINK}
        )
    except ValidationError as e:
        print(f"✅ Caught malformed token ({e.field}): {e.message}")


async def example_live_paths():
    """Demonstrate path generation against real nodes."""
    print("\n=== Live Path Generation Example ===")

    config = BancorConfig.from_env()
    if not config.ethereum_node_url and not config.eos_node_url:
        print("⚠️  No node configured, skipping")
        return

    source = Token(blockchain_type="ethereum", blockchain_id=DAI)
    target = Token(blockchain_type="ethereum", blockchain_id=LINK)

    try:
        result = await generate_path(config, source, target)
        print(f"DAI -> LINK: {result.to_wire()}")
    except AdapterError as e:
        print(f"❌ Node request failed ({e.operation}): {e.message}")


async def main():
    """Run all path generation examples."""
    print("🚀 Bancor SDK Path Generation Examples")
    print("=" * 50)

    try:
        await example_offline_paths()
        await example_error_handling()
        await example_live_paths()

        print("\n" + "=" * 50)
        print("✅ All examples completed successfully!")

    except BancorSDKError as e:
        print(f"\n❌ Example failed with error: {e}")
        logger.exception("Example execution failed")


if __name__ == "__main__":
    # Set up example environment variables if not already set
    if not os.environ.get('BANCOR_ETHEREUM_NODE_URL'):
        os.environ['BANCOR_ETHEREUM_NODE_URL'] = 'https://cloudflare-eth.com'

    # Run the examples
    asyncio.run(main())
