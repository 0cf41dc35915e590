"""
Reusable validators for Bitcoin domain primitives.

Each check is a plain function returning the accepted value or raising a
``PydanticCustomError``; the ``Annotated`` aliases at the bottom attach them
to schema fields. Address checks are charset and length only: checksum
verification is left to the node.
"""
import re
from typing import Annotated, Any, Callable, Iterable, List

from pydantic import AfterValidator, BeforeValidator, Field, StrictInt
from pydantic_core import PydanticCustomError

BASE58_RE = re.compile(r"^[123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz]+$")
BECH32_RE = re.compile(r"^[a-z0-9]+$")
WALLET_NAME_RE = re.compile(r"^(?![-])(?!(\.{1,2})$)(?!.*[-.]$)[a-zA-Z0-9._-]{1,64}$")
HEX_RE = re.compile(r"^[a-fA-F0-9]*$")
HEX64_RE = re.compile(r"^[a-fA-F0-9]{64}$")
HEX8_RE = re.compile(r"^[a-fA-F0-9]{8}$")

ADDRESS_MIN_LENGTH = 26
ADDRESS_MAX_LENGTH = 90
WALLET_NAME_MAX_LENGTH = 64
# WIF: 51 chars for uncompressed keys, 52 for compressed
PRIVKEY_LENGTHS = (51, 52)


# ───── Predicates ─────
def is_valid_address(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    if not ADDRESS_MIN_LENGTH <= len(value) <= ADDRESS_MAX_LENGTH:
        return False
    return bool(BASE58_RE.match(value) or BECH32_RE.match(value))


def is_valid_wallet_name(value: Any) -> bool:
    return isinstance(value, str) and bool(WALLET_NAME_RE.match(value))


def is_valid_privkey(value: Any) -> bool:
    return (
        isinstance(value, str)
        and len(value) in PRIVKEY_LENGTHS
        and bool(BASE58_RE.match(value))
    )


def is_hex(value: Any) -> bool:
    return isinstance(value, str) and bool(HEX_RE.match(value))


# ───── Field checks ─────
def check_address(value: str) -> str:
    if not is_valid_address(value):
        raise PydanticCustomError("address_format", "is not a valid Bitcoin address")
    return value


def check_wallet_name(value: str) -> str:
    if not is_valid_wallet_name(value):
        raise PydanticCustomError(
            "wallet_name_format",
            "must contain only letters, numbers, dots, underscores and hyphens, "
            "and cannot start with a hyphen or end with a dot or hyphen",
        )
    return value


def check_hex(value: str) -> str:
    if not is_hex(value):
        raise PydanticCustomError("hex_format", "must be a hexadecimal string")
    return value


def check_hex64(value: str) -> str:
    if not HEX64_RE.match(value):
        raise PydanticCustomError(
            "hex64_format", "must be a 64-character hexadecimal string", {"length": 64}
        )
    return value


def check_hex8(value: str) -> str:
    if not HEX8_RE.match(value):
        raise PydanticCustomError(
            "hex8_format", "must be an 8-character hexadecimal string", {"length": 8}
        )
    return value


def one_of(*allowed: Any) -> BeforeValidator:
    """Inclusion check against a fixed value set.

    Runs before the type check, so a value of the wrong type also reports
    the allowed set.
    """
    listing = ", ".join(str(value) for value in allowed)

    def check(value: Any) -> Any:
        if value not in allowed:
            raise PydanticCustomError(
                "inclusion",
                "is invalid, must be one of: {allowed}",
                {"allowed": listing, "enum": list(allowed)},
            )
        return value

    return BeforeValidator(check)


def all_items(predicate: Callable[[Any], bool], error_type: str, message: str) -> AfterValidator:
    """List check failing with a single message when any item fails ``predicate``."""

    def check(values: Iterable[Any]) -> List[Any]:
        values = list(values)
        if not all(predicate(value) for value in values):
            raise PydanticCustomError(error_type, message)
        return values

    return AfterValidator(check)


# ───── Annotated field types ─────
Address = Annotated[str, AfterValidator(check_address)]
WalletName = Annotated[
    str, Field(min_length=1, max_length=WALLET_NAME_MAX_LENGTH), AfterValidator(check_wallet_name)
]
Hex64 = Annotated[str, AfterValidator(check_hex64)]
Txid = Hex64
Hex8 = Annotated[str, AfterValidator(check_hex8)]
HexString = Annotated[str, AfterValidator(check_hex)]
RequiredHexString = Annotated[str, Field(min_length=1), AfterValidator(check_hex)]

AddressList = Annotated[
    List[str],
    all_items(is_valid_address, "address_format", "contains invalid Bitcoin addresses"),
]
PrivKeyList = Annotated[
    List[str],
    Field(min_length=1),
    all_items(is_valid_privkey, "privkey_format", "contains invalid private keys"),
]
OutputIndexList = Annotated[
    List[StrictInt],
    all_items(lambda index: index >= 0, "greater_than_equal", "all output indices must be non-negative"),
]

ESTIMATE_MODES = ("unset", "economical", "conservative")
ADDRESS_TYPES = ("legacy", "p2sh-segwit", "bech32", "bech32m")
SIGHASH_TYPES = (
    "ALL",
    "NONE",
    "SINGLE",
    "ALL|ANYONECANPAY",
    "NONE|ANYONECANPAY",
    "SINGLE|ANYONECANPAY",
)

EstimateMode = Annotated[str, one_of(*ESTIMATE_MODES)]
SighashType = Annotated[str, one_of(*SIGHASH_TYPES)]
