"""Test configuration and utilities for Bancor SDK."""

import logging
import sys
from pathlib import Path

# Add the src directory to the path so we can import the SDK modules
test_dir = Path(__file__).parent
project_dir = test_dir.parent
src_dir = project_dir / "src"
sys.path.insert(0, str(src_dir))

# Configure logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

# Suppress noisy logs during testing
logging.getLogger('aiohttp').setLevel(logging.WARNING)
logging.getLogger('asyncio').setLevel(logging.WARNING)

# Test configuration
TEST_CONFIG = {
    'timeout': 5.0,
    'max_retries': 1,
    'retry_delay': 0.01,
    'test_ethereum_node_url': 'https://eth.example.invalid',
    'test_eos_node_url': 'https://eos.example.invalid',
}
