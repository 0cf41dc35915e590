"""
Field-name normalization for Bitcoin Core payloads.

Bitcoin Core mixes hyphenated, camelCase, abbreviated and space-separated
keys in its responses. Every result schema runs its raw payload through
:func:`normalize_attrs` before casting, so the schemas only ever declare
snake_case fields. Unknown keys pass through untouched.
"""
from types import MappingProxyType
from typing import Any, Dict, Mapping

FIELD_NAME_MAP: Mapping[str, str] = MappingProxyType(
    {
        "bip125-replaceable": "bip125_replaceable",
        "fee reason": "fee_reason",
        "involvesWatchonly": "involves_watchonly",
        "scriptPubKey": "script_pub_key",
        "scriptSig": "script_sig",
        "reqSigs": "req_sigs",
        "minimumAmount": "minimum_amount",
        "maximumAmount": "maximum_amount",
        "maximumCount": "maximum_count",
        "minimumSumAmount": "minimum_sum_amount",
        "redeemScript": "redeem_script",
        "witnessScript": "witness_script",
        "versionHex": "version_hex",
        "nTx": "n_tx",
    }
)


def _check_table(table: Mapping[str, str]) -> None:
    # a canonical name that is also a raw key would make normalization non-idempotent
    overlap = set(table) & set(table.values())
    if overlap:
        raise RuntimeError(f"field name map is not idempotent: {sorted(overlap)}")

    targets = list(table.values())
    duplicates = sorted({name for name in targets if targets.count(name) > 1})
    if duplicates:
        raise RuntimeError(f"field name map has colliding targets: {duplicates}")


_check_table(FIELD_NAME_MAP)


def normalize_key(key: Any) -> Any:
    if isinstance(key, str):
        return FIELD_NAME_MAP.get(key, key)
    return key


def normalize_attrs(attrs: Mapping[Any, Any]) -> Dict[Any, Any]:
    """Return a new dict with every known irregular key renamed; values are untouched."""
    return {normalize_key(key): value for key, value in attrs.items()}
