# btxrpc/client/client.py
import logging
import uuid
from typing import Any, Dict, Optional

import httpx

from btxrpc.config.default import BASE_URL, TIMEOUT, USER_AGENT
from btxrpc.core.schema import RequestSchema
from btxrpc.errors import HTTP_STATUS_REASONS, MethodError, RPCError
from btxrpc.schemas import RPCRequest, RPCResponse

logger = logging.getLogger("btxrpc.transport")

DEFAULT_HEADERS = {
    "user-agent": USER_AGENT,
    "content-type": "application/json",
    "accept": "application/json",
}

# statuses that fail the call even when the body carries a JSON-RPC error
_TRANSPORT_STATUSES = (400, 401, 403, 404, 405, 502, 503, 504)


def new_request_id() -> str:
    return f"btxrpc-{uuid.uuid4()}"


def response_from_http(status: int, body: Any) -> RPCResponse:
    """Map an HTTP status and decoded body onto a response, or raise.

    Bitcoin Core answers method errors with HTTP 404/500 and a JSON-RPC
    error object, so the body is looked at before a bare 500 is reported.
    """
    if status == 200 and isinstance(body, dict) and body.get("error") is None:
        return RPCResponse.model_validate(body)

    if status in _TRANSPORT_STATUSES:
        raise RPCError.from_status(status, body=body)

    if isinstance(body, dict) and body.get("result") is None and isinstance(body.get("error"), dict):
        error = body["error"]
        if "code" in error and "message" in error:
            # raises MethodError
            RPCResponse.model_validate(body).unwrap()

    if status == 500:
        raise RPCError(HTTP_STATUS_REASONS[500], {"status": status, "body": body})

    raise RPCError("unknown_error", {"status": status, "body": body})


class JSONRPCTransport:
    """Posts JSON-RPC 1.0 requests to a Bitcoin Core node."""

    def __init__(
        self,
        url: str = BASE_URL,
        *,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = TIMEOUT,
        headers: Optional[Dict[str, str]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url.rstrip("/")
        auth = httpx.BasicAuth(username, password or "") if username else None
        self.client = client or httpx.AsyncClient(
            base_url=self.url,
            auth=auth,
            headers={**DEFAULT_HEADERS, **(headers or {})},
            timeout=timeout,
        )

    async def send(
        self,
        request: RPCRequest,
        *,
        id: Optional[str] = None,
        path: Optional[str] = None,
    ) -> RPCResponse:
        """Send one request; returns the successful response or raises."""
        request_id = id or request.id or new_request_id()
        path = path or request.path
        payload = request.payload(request_id)

        logger.debug(f"Calling {request.method} on {path} (id={request_id})")
        try:
            resp = await self.client.post(path, json=payload)
        except httpx.RequestError as e:
            logger.error(f"Network error calling {request.method}: {e}")
            raise RPCError("network_error", {"method": request.method, "error": str(e)}) from e

        try:
            body = resp.json()
        except ValueError:
            body = resp.text

        try:
            return response_from_http(resp.status_code, body)
        except MethodError as e:
            logger.warning(f"{request.method} failed on the node: {e}")
            raise
        except RPCError as e:
            logger.error(f"{request.method} failed with HTTP {resp.status_code}: {e.reason}")
            raise

    async def call(self, request: RequestSchema | RPCRequest, **opts: Any) -> Any:
        """Send and return the raw ``result`` payload."""
        if isinstance(request, RequestSchema):
            request = request.encode()
        response = await self.send(request, **opts)
        return response.result

    async def close(self):
        await self.client.aclose()

    async def __aenter__(self) -> "JSONRPCTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
