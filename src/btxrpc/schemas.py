# btxrpc/schemas.py
from typing import Any, Dict, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field

from btxrpc.errors import MethodError


class RPCRequest(BaseModel):
    """Wire request: method name, positional params and the HTTP path it is posted to."""

    model_config = ConfigDict(frozen=True)

    jsonrpc: str = Field(default="1.0")
    method: str
    params: Tuple[Any, ...] = ()
    id: Optional[str] = None  # assigned by the transport when left empty
    path: str = Field(default="/", exclude=True)

    def payload(self, id: Optional[str] = None) -> Dict[str, Any]:
        """JSON-RPC 1.0 envelope posted to the node."""
        return {
            "method": self.method,
            "params": list(self.params),
            "jsonrpc": self.jsonrpc,
            "id": id or self.id,
        }


class RPCErrorObject(BaseModel):
    code: int
    message: str
    data: Optional[Any] = None


class RPCResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    result: Optional[Any] = None
    error: Optional[RPCErrorObject] = None
    id: Optional[Union[int, str]] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return ``result``, or raise the node's error without looking at ``result``."""
        if self.error is not None:
            raise MethodError(
                code=self.error.code,
                message=self.error.message,
                id=None if self.id is None else str(self.id),
            )
        return self.result
