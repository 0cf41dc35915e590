# btxrpc/api/base.py
import logging
from typing import Any, Mapping, Optional, Type

from btxrpc.client.client import JSONRPCTransport
from btxrpc.core.registry import registry
from btxrpc.core.schema import RequestSchema
from btxrpc.errors import FieldValidationError

logger = logging.getLogger("btxrpc.api")

Params = Optional[Mapping[str, Any]]

# keywords consumed by the transport; anything else is a request field
CALL_OPTIONS = ("id", "path")


async def invoke(
    transport: JSONRPCTransport,
    schema: Type[RequestSchema],
    params: Params = None,
    **fields: Any,
) -> Any:
    """Build, send and parse one call.

    Raises ``FieldValidationError`` before any I/O when ``params`` are
    invalid; ``MethodError``/``RPCError`` come from the transport.
    """
    options = {key: fields.pop(key) for key in CALL_OPTIONS if key in fields}
    try:
        request = schema.build_or_raise(params, **fields)
    except FieldValidationError as e:
        logger.warning(f"Rejected params for {schema.method}: {e}")
        raise
    raw = await transport.call(request, **options)
    return registry.get(schema.method).parse(raw, request)


class Context:
    """A group of related RPC methods sharing one transport."""

    def __init__(self, transport: JSONRPCTransport):
        self._transport = transport

    async def _call(self, schema: Type[RequestSchema], params: Params = None, **opts: Any) -> Any:
        return await invoke(self._transport, schema, params, **opts)
