# btxrpc/core/registry.py
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type, Union

from btxrpc.core.schema import RequestSchema, ResultSchema
from btxrpc.errors import METHOD_NOT_FOUND, ShapeMismatchError

logger = logging.getLogger("btxrpc.registry")

ResultParser = Callable[[Any, RequestSchema], Any]


# ──────────────────────────────────────────────────────────────
# Result parsers
# ──────────────────────────────────────────────────────────────
def passthrough(raw: Any, request: RequestSchema) -> Any:
    """Plain JSON results (numbers, strings, maps, null)."""
    return raw


def list_of(item: Optional[Type[ResultSchema]] = None) -> ResultParser:
    """Array results; items are cast through ``item`` when given."""

    def parse(raw: Any, request: RequestSchema) -> List[Any]:
        if item is not None:
            return item.parse_list_or_raise(raw)
        if not isinstance(raw, list):
            raise ShapeMismatchError(request.method, raw)
        return raw

    return parse


def _schema_parser(schema: Type[ResultSchema]) -> ResultParser:
    def parse(raw: Any, request: RequestSchema) -> Any:
        return schema.parse_or_raise(raw)

    return parse


# ──────────────────────────────────────────────────────────────
# _MethodEntry – request schema + how to read its result
# ──────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class _MethodEntry:
    request: Type[RequestSchema]
    """Request schema, which also carries the method name."""

    parse: ResultParser
    """Turns the raw ``result`` into the typed value handed to callers."""

    description: Optional[str] = None

    @property
    def name(self) -> str:
        return self.request.method

    def to_json(self) -> dict:
        return {
            "name": self.name,
            "request": self.request.__name__,
            "fields": list(self.request.model_fields),
            "description": self.description,
        }


class SchemaRegistry:
    """Method name → request schema and result parser."""

    def __init__(self):
        self._methods: Dict[str, _MethodEntry] = {}

    def register(
        self,
        result: Union[Type[ResultSchema], ResultParser, None] = None,
        description: Optional[str] = None,
    ):
        def decorator(request: Type[RequestSchema]) -> Type[RequestSchema]:
            if isinstance(result, type) and issubclass(result, ResultSchema):
                parse = _schema_parser(result)
            else:
                parse = result or passthrough

            if request.method in self._methods:
                raise ValueError(f"Method '{request.method}' already registered")

            doc = (request.__doc__ or "").strip()
            self._methods[request.method] = _MethodEntry(
                request=request,
                parse=parse,
                description=description or (doc.splitlines()[0] if doc else None),
            )
            logger.debug(f"Registered: {request.method}")
            return request

        return decorator

    def get(self, method: str) -> _MethodEntry:
        try:
            return self._methods[method]
        except KeyError:
            logger.error(f"Method not found: {method}")
            raise METHOD_NOT_FOUND(method) from None

    def list_methods(self) -> Dict[str, dict]:
        return {name: entry.to_json() for name, entry in sorted(self._methods.items())}


registry = SchemaRegistry()
register = registry.register
