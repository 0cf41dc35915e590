# btxrpc/errors.py
from typing import Any, Dict, List, Optional, Tuple, Union
from dataclasses import dataclass, field

from pydantic import ValidationError


# ──────────────────────────────────────────────────────────────
# Field validation
# ──────────────────────────────────────────────────────────────
Loc = Tuple[Union[str, int], ...]

# pydantic messages that read poorly next to a field name
_MESSAGE_OVERRIDES = {
    "missing": ("required", "can't be blank"),
}


@dataclass(frozen=True)
class FieldError:
    """A single failing field, with enough metadata to build a localized message."""

    field: str
    """Top-level field name on the schema that failed."""

    message: str
    """Human-readable message (English)."""

    loc: Loc = ()
    """Full location, including embedded field names and list indexes."""

    metadata: Dict[str, Any] = field(default_factory=dict)
    """Validation kind plus the constraint values (``gt``, ``max_length``, ``allowed`` ...)."""

    @property
    def path(self) -> str:
        parts: List[str] = []
        for item in self.loc:
            if isinstance(item, int):
                parts.append(f"[{item}]")
            else:
                parts.append(f".{item}" if parts else str(item))
        return "".join(parts) or self.field


class FieldValidationError(ValueError):
    """Every failing field of one build/parse call, reported together."""

    def __init__(self, schema: str, errors: List[FieldError]):
        self.schema = schema
        self.errors = list(errors)
        super().__init__(self._summary())

    @classmethod
    def from_validation_error(cls, schema: str, exc: ValidationError) -> "FieldValidationError":
        errors = []
        for err in exc.errors(include_url=False):
            loc = tuple(err.get("loc", ()))
            metadata = {"validation": err["type"]}
            for key, value in (err.get("ctx") or {}).items():
                metadata[key] = value if isinstance(value, (str, int, float, bool, list, tuple)) else str(value)

            message = err["msg"]
            if err["type"] in _MESSAGE_OVERRIDES:
                metadata["validation"], message = _MESSAGE_OVERRIDES[err["type"]]

            errors.append(
                FieldError(
                    field=str(loc[0]) if loc else "__root__",
                    message=message,
                    loc=loc,
                    metadata=metadata,
                )
            )
        return cls(schema, errors)

    @property
    def fields(self) -> List[str]:
        seen: List[str] = []
        for error in self.errors:
            if error.field not in seen:
                seen.append(error.field)
        return seen

    def errors_on(self) -> Dict[str, List[str]]:
        """Messages grouped by error path, e.g. ``{"requests[0].label": [...]}``."""
        grouped: Dict[str, List[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.path, []).append(error.message)
        return grouped

    def _summary(self) -> str:
        details = "; ".join(f"{e.path}: {e.message}" for e in self.errors)
        return f"invalid {self.schema}: {details}"


class ShapeMismatchError(TypeError):
    """A result payload whose top-level JSON type the schema does not accept."""

    def __init__(self, schema: str, value: Any):
        self.schema = schema
        self.value = value
        super().__init__(
            f"{schema} cannot parse a {type(value).__name__} payload: {value!r}"
        )


# ──────────────────────────────────────────────────────────────
# Method errors (JSON-RPC error object returned by the node)
# ──────────────────────────────────────────────────────────────
METHOD_ERROR_REASONS: Dict[int, str] = {
    # Standard JSON-RPC 2.0 errors
    -32600: "invalid_request",
    -32601: "method_not_found",
    -32602: "invalid_params",
    -32603: "internal_error",
    -32700: "parse_error",
    # General application defined errors
    -1: "misc_error",
    -3: "type_error",
    -5: "invalid_address_or_key",
    -7: "out_of_memory",
    -8: "invalid_parameter",
    -20: "database_error",
    -22: "deserialization_error",
    -25: "verify_error",
    -26: "verify_rejected",
    -27: "verify_already_in_utxo_set",
    -28: "in_warmup",
    -32: "method_deprecated",
    # P2P client errors
    -9: "client_not_connected",
    -10: "client_in_initial_download",
    -23: "client_node_already_added",
    -24: "client_node_not_added",
    -29: "client_node_not_connected",
    -30: "client_invalid_ip_or_subnet",
    -31: "client_p2p_disabled",
    -34: "client_node_capacity_reached",
    # Chain errors
    -33: "client_mempool_disabled",
    # Wallet errors
    -4: "wallet_error",
    -6: "wallet_insufficient_funds",
    -11: "wallet_invalid_label_name",
    -12: "wallet_keypool_ran_out",
    -13: "wallet_unlock_needed",
    -14: "wallet_passphrase_incorrect",
    -15: "wallet_wrong_enc_state",
    -16: "wallet_encryption_failed",
    -17: "wallet_already_unlocked",
    -18: "wallet_not_found",
    -19: "wallet_not_specified",
    -35: "wallet_already_loaded",
    -36: "wallet_already_exists",
    # Backwards compatible aliases
    -2: "forbidden_by_safe_mode",
}


def method_error_reason(code: int) -> str:
    return METHOD_ERROR_REASONS.get(code, "unknown_error")


@dataclass
class MethodError(Exception):
    code: int
    message: str
    id: Optional[str] = None

    @property
    def reason(self) -> str:
        return method_error_reason(self.code)

    def __str__(self) -> str:
        return f"{self.reason} ({self.code}): {self.message}"

    def to_dict(self):
        base = {"code": self.code, "message": self.message}
        if self.id is not None:
            base["id"] = self.id
        return base


# Local stand-in for the node's own error
METHOD_NOT_FOUND = lambda method, id=None: MethodError(-32601, f"Method not found: {method}", id)


# ──────────────────────────────────────────────────────────────
# Transport errors
# ──────────────────────────────────────────────────────────────
HTTP_STATUS_REASONS: Dict[int, str] = {
    400: "http_bad_request",
    401: "http_unauthorized",
    403: "http_forbidden",
    404: "http_not_found",
    405: "http_method_not_allowed",
    500: "http_internal_server_error",
    502: "http_bad_gateway",
    503: "http_service_unavailable",
    504: "http_gateway_timeout",
}

RPC_ERROR_MESSAGES: Dict[str, str] = {
    "http_bad_request": (
        "Bad Request: the node could not understand the request. "
        "Check the method name and parameters."
    ),
    "http_unauthorized": (
        "Unauthorized: RPC credentials are missing or incorrect. "
        "Please check your Bitcoin Core `rpcuser` and `rpcpassword` configuration."
    ),
    "http_forbidden": (
        "Forbidden: the node refused the request. "
        "Check `rpcallowip` and `rpcwhitelist` in your Bitcoin Core configuration."
    ),
    "http_not_found": (
        "Not Found: the requested endpoint does not exist. "
        "Check the RPC URL and the wallet path."
    ),
    "http_method_not_allowed": (
        "Method Not Allowed: the endpoint does not accept this HTTP method."
    ),
    "http_internal_server_error": (
        "Internal Server Error: the node failed while processing the request."
    ),
    "http_bad_gateway": (
        "Bad Gateway: a proxy in front of the node returned an invalid response."
    ),
    "http_service_unavailable": (
        "Service Unavailable: the node is not ready to accept requests. "
        "It may be starting up or overloaded."
    ),
    "http_gateway_timeout": (
        "Gateway Timeout: a proxy in front of the node timed out waiting for it."
    ),
    "network_error": "Network error: could not reach the node.",
    "unknown_error": "Unknown error: the node returned an unexpected response.",
}


@dataclass
class RPCError(Exception):
    reason: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def status(self) -> Optional[int]:
        return self.metadata.get("status")

    def __str__(self) -> str:
        message = RPC_ERROR_MESSAGES.get(self.reason, RPC_ERROR_MESSAGES["unknown_error"])
        if self.reason == "unknown_error" and self.metadata:
            return f"{message} Metadata: {self.metadata!r}"
        return message

    @classmethod
    def from_status(cls, status: int, **metadata: Any) -> "RPCError":
        return cls(HTTP_STATUS_REASONS.get(status, "unknown_error"), {"status": status, **metadata})
