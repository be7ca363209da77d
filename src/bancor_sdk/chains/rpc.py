"""HTTP and JSON-RPC transport shared by the chain adapters."""

import asyncio
import itertools
import logging
from typing import Optional, Any, Dict
import aiohttp
from aiohttp import ClientTimeout, ClientError

from ..core.config import BancorConfig
from ..core.types import RPCRequest, RPCResponse
from ..core.exceptions import (
    RPCError,
    NetworkError,
    TimeoutError as SDKTimeoutError,
    RateLimitError
)

logger = logging.getLogger(__name__)


class JsonRpcClient:
    """Async HTTP client for a blockchain node."""

    def __init__(self, url: str, config: BancorConfig):
        """Initialize the client.

        Args:
            url: Base URL of the node
            config: Bancor configuration holding timeout and retry settings
        """
        self.url = url
        self.config = config
        self.session: Optional[aiohttp.ClientSession] = None
        self._closed = False
        self._ids = itertools.count(1)

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self):
        """Ensure aiohttp session is created."""
        if self.session is None or self.session.closed:
            timeout = ClientTimeout(total=self.config.request_timeout)
            self.session = aiohttp.ClientSession(
                timeout=timeout,
                headers={
                    'Content-Type': 'application/json',
                    'User-Agent': 'Bancor-Python-SDK/0.1.0'
                }
            )

    async def close(self):
        """Close the HTTP session."""
        if self.session and not self.session.closed:
            await self.session.close()
        self._closed = True

    async def post_json(
        self,
        payload: Dict[str, Any],
        path: str = '',
        method: Optional[str] = None,
        timeout: Optional[float] = None
    ) -> Any:
        """POST a JSON payload with retry logic and return the decoded body.

        Args:
            payload: JSON body
            path: Path appended to the node URL
            method: Name used in errors and logs, defaults to ``path``
            timeout: Request timeout override

        Returns:
            Decoded JSON response

        Raises:
            RPCError: HTTP error or undecodable response
            RateLimitError: Node answered 429
            NetworkError: Network connectivity issues
            TimeoutError: Request timed out
        """
        if self._closed:
            raise RuntimeError("Client has been closed")

        await self._ensure_session()

        url = self.url.rstrip('/') + path if path else self.url
        method = method or path
        last_exception = None

        for attempt in range(self.config.max_retries + 1):
            try:
                logger.debug(f"Request attempt {attempt + 1}: {method}")

                async with self.session.post(
                    url,
                    json=payload,
                    timeout=ClientTimeout(total=timeout or self.config.request_timeout)
                ) as response:

                    if response.status == 429:
                        retry_after = int(response.headers.get('Retry-After', 60))
                        raise RateLimitError(
                            "Rate limit exceeded",
                            retry_after=retry_after,
                            details={'status_code': response.status, 'method': method}
                        )

                    if response.status >= 400:
                        error_text = await response.text()
                        raise RPCError(
                            f"HTTP {response.status}: {error_text}",
                            method=method,
                            status_code=response.status,
                            response_data=error_text
                        )

                    try:
                        return await response.json()
                    except (aiohttp.ContentTypeError, ValueError) as e:
                        raise RPCError(
                            f"Failed to parse JSON response: {e}",
                            method=method,
                            status_code=response.status
                        )

            except (ClientError, asyncio.TimeoutError) as e:
                last_exception = e
                if attempt < self.config.max_retries:
                    delay = self.config.retry_delay * (2 ** attempt)  # Exponential backoff
                    logger.warning(f"{method} failed, retrying in {delay}s: {e}")
                    await asyncio.sleep(delay)
                    continue
                break

        if isinstance(last_exception, asyncio.TimeoutError):
            raise SDKTimeoutError(
                f"{method} timed out after {self.config.max_retries + 1} attempts",
                timeout_duration=self.config.request_timeout
            )
        raise NetworkError(
            f"Network error after {self.config.max_retries + 1} attempts: {last_exception}",
            operation=method
        )

    async def call(self, method: str, params: list, timeout: Optional[float] = None) -> Any:
        """Make a JSON-RPC call.

        Args:
            method: RPC method name
            params: RPC parameters
            timeout: Request timeout override

        Returns:
            RPC result data

        Raises:
            RPCError: RPC call failed or returned an error object
        """
        request = RPCRequest(id=next(self._ids), method=method, params=params)
        json_data = await self.post_json(request.model_dump(), method=method, timeout=timeout)

        try:
            rpc_response = RPCResponse(**json_data)
        except (TypeError, ValueError) as e:
            raise RPCError(
                f"Invalid RPC response format: {e}",
                method=method,
                response_data=json_data
            )

        if rpc_response.error:
            error = rpc_response.error
            error_code = error.get('code', -1)
            error_message = error.get('message', 'Unknown RPC error')
            raise RPCError(
                f"RPC error {error_code}: {error_message}",
                method=method,
                response_data=error,
                details={'rpc_error': error}
            )

        return rpc_response.result
