from typing import Callable

from prometheus_query.clients.api_context import _ApiContextManager
from prometheus_query.clients.utils import _decode_response, _Envelope
from prometheus_query.exceptions import PrometheusClientException
from prometheus_query.models.base import PrometheusRequest
from prometheus_query.models.generics import ResponseT, _PromClientResponse


class _ApiClient:

    def __init__(self, api_context: _ApiContextManager):
        self.api_context = api_context

    async def _dispatch(
        self, operation: str, request: PrometheusRequest, processor: Callable[[_Envelope], ResponseT]
    ) -> _PromClientResponse[ResponseT]:
        """
        Validate and render the request, send it, and decode the reply.

        Every failure is returned as the error half of the tuple; nothing is retried.
        """
        metrics = self.api_context.metrics
        try:
            method, path, params, form = request.render()
            url = self.api_context.build_url(path)
            with metrics.request_duration.labels(operation).time():
                if form:
                    status, content = await self.api_context.handle_request(
                        method, url, self.api_context.headers, data=params
                    )
                else:
                    status, content = await self.api_context.handle_request(
                        method, url, self.api_context.headers, params=params
                    )
            response = _decode_response(content, status, operation, processor)
        except PrometheusClientException as e:
            metrics.requests.labels(operation, e.outcome).inc()
            return (None, e.response)
        metrics.requests.labels(operation, "success").inc()
        return (response, None)

__all__ = [
    "_ApiClient"
]
