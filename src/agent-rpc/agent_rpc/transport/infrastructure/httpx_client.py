"""HttpxHttpClient: HttpClient implementation backed by httpx.AsyncClient."""

from types import TracebackType

import httpx

from agent_rpc.config.domain.config import HttpConfig
from agent_rpc.transport.infrastructure.errors import AgentTransportError

_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


class HttpxHttpClient:
    """Posts JSON bodies through a pooled httpx.AsyncClient.

    Basic-auth credentials embedded in the URL are applied by httpx. Use as an
    async context manager, or call aclose(), to release the connection pool.
    """

    def __init__(
        self, config: HttpConfig, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        timeout = httpx.Timeout(
            connect=config.connect_timeout_seconds,
            read=config.read_timeout_seconds,
            write=config.read_timeout_seconds,
            pool=config.connect_timeout_seconds,
        )
        self._client = httpx.AsyncClient(
            headers=_HEADERS,
            timeout=timeout,
            verify=config.verify_tls,
            transport=transport,
        )

    async def post(self, url: str, body: bytes) -> bytes:
        """POST body to url and return the raw response body.

        Raises:
            AgentTransportError: on any httpx error or a non-200 status code.
        """
        try:
            response = await self._client.post(url, content=body)
        except httpx.HTTPError as exc:
            raise AgentTransportError(reason=str(exc) or type(exc).__name__) from exc

        if response.status_code != httpx.codes.OK:
            raise AgentTransportError(
                reason=f"agent responded with non-successful status code: {response.status_code}"
            )

        return response.content

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpxHttpClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()
