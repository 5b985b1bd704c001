import asyncio
from contextlib import contextmanager
from logging import getLogger
from typing import Any, AsyncIterator, Callable, Generator, Optional, Set, TypeVar

from httpx import AsyncClient, Client, Response
from opentelemetry import trace
from opentelemetry.trace import Span, SpanKind

from .._config import Config
from .._decoders import ResponseMetadata
from .._endpoint import Endpoint
from .._response_parser import decode_response
from .._utils import RequestSpec, get_httpx_client_kwargs, setup_logging
from .._utils.constants import LOAD_SPAN_NAME, LOGGER_NAME
from ..models.errors import TransportFailure
from ..models.results import LoadResult

ResponseT = TypeVar("ResponseT")


class Session:
    """Loads endpoints over an httpx transport.

    The same build -> send -> decode pipeline is exposed four ways:

    - ``await load_async(endpoint)``, the primitive,
    - ``load_stream(endpoint)``, a cold async iterator yielding one value,
    - ``load_with_callback(endpoint, completion)``, a scheduled task that
      reports a :class:`LoadResult` to ``completion``,
    - ``load(endpoint)``, the blocking form over ``httpx.Client``.

    Each call sends exactly one request. There is no retry, caching or
    deduplication; transport errors reach the caller unchanged.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        *,
        client: Optional[Client] = None,
        async_client: Optional[AsyncClient] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config or Config()
        if self._config.debug:
            setup_logging(debug=True)

        self._owns_client = client is None
        self._owns_async_client = async_client is None
        self._client_kwargs = (
            get_httpx_client_kwargs(self._config)
            if client is None or async_client is None
            else {}
        )
        self._client = client or Client(**self._client_kwargs)
        # created on first async load
        self._async_client = async_client
        self._callback_tasks: Set["asyncio.Task[None]"] = set()

        self._tracer = trace.get_tracer(__name__)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def _client_async(self) -> AsyncClient:
        if self._async_client is None:
            self._async_client = AsyncClient(**self._client_kwargs)
        return self._async_client

    @contextmanager
    def _load_span(self, spec: RequestSpec) -> Generator[Span, None, None]:
        with self._tracer.start_as_current_span(LOAD_SPAN_NAME, kind=SpanKind.CLIENT) as span:
            span.set_attribute("http.request.method", spec.method)
            span.set_attribute("url.full", str(spec.url))
            try:
                yield span
            except TransportFailure as e:
                self._logger.debug(f"Transport failure: {spec.method} {spec.url}: {e!r}")
                raise

    def _finish(
        self, endpoint: Endpoint[ResponseT], response: Response, span: Span
    ) -> ResponseT:
        self._logger.debug(f"Response: {response.status_code} {response.url}")
        span.set_attribute("http.response.status_code", response.status_code)

        if self._config.raise_for_status:
            response.raise_for_status()

        metadata = ResponseMetadata.from_response(response)
        return decode_response(endpoint, response.content, metadata)

    def _build(self, endpoint: Endpoint[ResponseT]) -> RequestSpec:
        spec = endpoint.build_request()
        self._logger.debug(f"Request: {spec.method} {spec.url}")
        self._logger.debug(f"HEADERS: {spec.headers}")
        return spec

    async def load_async(self, endpoint: Endpoint[ResponseT]) -> ResponseT:
        """Build, send and decode ``endpoint``.

        Args:
            endpoint (Endpoint): The endpoint to load.

        Returns:
            The decoded response.

        Raises:
            InvalidURLComponents: If the URL cannot be built. Nothing is sent.
            httpx.HTTPError: Any transport failure, re-raised unchanged.
            DecodingError: If the body does not match the endpoint's decoder.
        """
        spec = self._build(endpoint)
        with self._load_span(spec) as span:
            response = await self._client_async.send(spec.to_httpx(self._client_async))
            return self._finish(endpoint, response, span)

    def load(self, endpoint: Endpoint[ResponseT]) -> ResponseT:
        """Blocking counterpart of :meth:`load_async`, sent over ``httpx.Client``."""
        spec = self._build(endpoint)
        with self._load_span(spec) as span:
            response = self._client.send(spec.to_httpx(self._client))
            return self._finish(endpoint, response, span)

    async def load_stream(self, endpoint: Endpoint[ResponseT]) -> AsyncIterator[ResponseT]:
        """Cold, single-value stream over :meth:`load_async`.

        Nothing is sent until the stream is iterated. It yields one value and
        stops, or raises the single error. Cancelling the consuming task
        cancels the in-flight request.

        Examples:
            ```python
            async for user in session.load_stream(endpoint):
                print(user.name)
            ```
        """
        yield await self.load_async(endpoint)

    def load_with_callback(
        self,
        endpoint: Endpoint[ResponseT],
        completion: Callable[[LoadResult[ResponseT]], Any],
    ) -> "asyncio.Task[None]":
        """Schedule :meth:`load_async` and report its outcome to ``completion``.

        Must be called with an event loop running. ``completion`` is invoked
        exactly once with a :class:`LoadResult`, unless the returned task is
        cancelled first, in which case the request is cancelled and
        ``completion`` is never called.

        Returns:
            asyncio.Task: Handle that can be awaited or cancelled.
        """

        async def run() -> None:
            try:
                value = await self.load_async(endpoint)
            except Exception as e:
                completion(LoadResult(error=e))
            else:
                completion(LoadResult(value=value))

        task = asyncio.get_running_loop().create_task(run())
        self._callback_tasks.add(task)
        task.add_done_callback(self._callback_tasks.discard)
        return task

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    async def aclose(self) -> None:
        if self._owns_async_client and self._async_client is not None:
            await self._async_client.aclose()
        self.close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "Session":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
