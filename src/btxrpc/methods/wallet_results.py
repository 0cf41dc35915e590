# btxrpc/methods/wallet_results.py
"""Typed results of the wallet RPC methods."""
from typing import Annotated, Any, Dict, List, Optional
from pydantic import Field, StrictBool, StrictFloat, StrictInt

from btxrpc.core.schema import EmbeddedSchema, ResultSchema
from btxrpc.core.types import Scanning
from btxrpc.core.validators import Hex64, HexString, Txid, one_of
from btxrpc.methods.common import ScriptVerificationError

Bip125Status = Annotated[str, one_of("yes", "no", "unknown")]
Category = Annotated[str, one_of("send", "receive", "generate", "immature", "orphan")]


# ──────────────────────────────────────────────────────────────
# Wallet lifecycle
# ──────────────────────────────────────────────────────────────
class CreateWalletResult(ResultSchema):
    name: str
    warning: Optional[str] = None


class LoadWalletResult(ResultSchema):
    name: str
    warning: Optional[str] = None


class UnloadWalletResult(ResultSchema):
    warning: Optional[str] = None


class GetWalletInfoResult(ResultSchema):
    """State of a loaded wallet, as returned by ``getwalletinfo``."""

    walletname: str
    walletversion: StrictInt = Field(gt=0)
    format: Annotated[str, one_of("bdb", "sqlite")]
    balance: Optional[StrictFloat] = None
    unconfirmed_balance: Optional[StrictFloat] = None
    immature_balance: Optional[StrictFloat] = None
    txcount: StrictInt = Field(ge=0)
    keypoololdest: Optional[StrictInt] = Field(None, gt=0)
    keypoolsize: StrictInt = Field(ge=0)
    keypoolsize_hd_internal: Optional[StrictInt] = Field(None, ge=0)
    unlocked_until: Optional[StrictInt] = Field(None, ge=0)
    paytxfee: Optional[StrictFloat] = Field(None, ge=0)
    hdseedid: Optional[str] = None
    private_keys_enabled: StrictBool
    avoid_reuse: StrictBool
    scanning: Optional[Scanning] = None
    descriptors: StrictBool

    @property
    def is_scanning(self) -> bool:
        return bool(self.scanning)


# ──────────────────────────────────────────────────────────────
# Balances
# ──────────────────────────────────────────────────────────────
class GetBalancesDetail(EmbeddedSchema):
    trusted: StrictFloat = Field(ge=0)
    untrusted_pending: StrictFloat = Field(ge=0)
    immature: StrictFloat = Field(ge=0)
    used: Optional[StrictFloat] = Field(None, ge=0)


class GetBalancesResult(ResultSchema):
    mine: GetBalancesDetail
    watchonly: Optional[GetBalancesDetail] = None


# ──────────────────────────────────────────────────────────────
# Addresses
# ──────────────────────────────────────────────────────────────
ScriptKind = Annotated[
    str,
    one_of(
        "nonstandard",
        "pubkey",
        "pubkeyhash",
        "scripthash",
        "multisig",
        "nulldata",
        "witness_v0_keyhash",
        "witness_v0_scripthash",
        "witness_unknown",
    ),
]


class GetAddressInfoResult(ResultSchema):
    address: str
    script_pub_key: HexString
    ismine: StrictBool
    iswatchonly: StrictBool
    solvable: StrictBool
    desc: Optional[str] = None
    isscript: StrictBool
    ischange: StrictBool
    iswitness: StrictBool
    witness_version: Optional[StrictInt] = Field(None, ge=0)
    witness_program: Optional[HexString] = None
    script: Optional[ScriptKind] = None
    hex: Optional[HexString] = None
    pubkeys: List[str] = Field(default_factory=list)
    sigsrequired: Optional[StrictInt] = Field(None, ge=0)
    pubkey: Optional[HexString] = None
    embedded: Optional[Dict[str, Any]] = None
    iscompressed: Optional[StrictBool] = None
    timestamp: Optional[StrictInt] = Field(None, ge=0)
    hdkeypath: Optional[str] = None
    hdseedid: Optional[str] = None
    hdmasterfingerprint: Optional[str] = None
    labels: List[str] = Field(default_factory=list)


# ──────────────────────────────────────────────────────────────
# Transactions
# ──────────────────────────────────────────────────────────────
class GetTransactionDetail(EmbeddedSchema):
    involves_watchonly: Optional[StrictBool] = None
    address: Optional[str] = None
    category: Category
    amount: StrictFloat
    label: Optional[str] = None
    vout: Optional[StrictInt] = Field(None, ge=0)
    fee: Optional[StrictFloat] = None
    abandoned: Optional[StrictBool] = None


class GetTransactionResult(ResultSchema):
    amount: StrictFloat
    fee: Optional[StrictFloat] = None
    confirmations: StrictInt
    generated: Optional[StrictBool] = None
    trusted: Optional[StrictBool] = None
    blockhash: Optional[Hex64] = None
    blockheight: Optional[StrictInt] = Field(None, ge=0)
    blockindex: Optional[StrictInt] = Field(None, ge=0)
    blocktime: Optional[StrictInt] = Field(None, ge=0)
    txid: Txid
    walletconflicts: List[str] = Field(default_factory=list)
    time: StrictInt = Field(ge=0)
    timereceived: StrictInt = Field(ge=0)
    comment: Optional[str] = None
    bip125_replaceable: Optional[Bip125Status] = None
    details: List[GetTransactionDetail] = Field(default_factory=list)
    hex: HexString
    decoded: Optional[Dict[str, Any]] = None


class ListTransactionsItem(ResultSchema):
    """One entry of ``listtransactions``."""

    involves_watchonly: Optional[StrictBool] = None
    address: Optional[str] = None
    category: Category
    amount: StrictFloat
    label: Optional[str] = None
    vout: Optional[StrictInt] = Field(None, ge=0)
    fee: Optional[StrictFloat] = None
    confirmations: Optional[StrictInt] = None
    generated: Optional[StrictBool] = None
    trusted: Optional[StrictBool] = None
    blockhash: Optional[Hex64] = None
    blockheight: Optional[StrictInt] = Field(None, ge=0)
    blockindex: Optional[StrictInt] = Field(None, ge=0)
    blocktime: Optional[StrictInt] = Field(None, ge=0)
    txid: Txid
    walletconflicts: List[str] = Field(default_factory=list)
    time: StrictInt = Field(ge=0)
    timereceived: StrictInt = Field(ge=0)
    comment: Optional[str] = None
    bip125_replaceable: Optional[Bip125Status] = None
    abandoned: Optional[StrictBool] = None


class ListUnspentItem(ResultSchema):
    """One entry of ``listunspent``."""

    txid: Txid
    vout: StrictInt = Field(ge=0)
    address: Optional[str] = None
    label: Optional[str] = None
    script_pub_key: Optional[HexString] = None
    amount: StrictFloat = Field(ge=0)
    confirmations: StrictInt = Field(ge=0)
    redeem_script: Optional[HexString] = None
    witness_script: Optional[HexString] = None
    spendable: StrictBool
    solvable: StrictBool
    reused: Optional[StrictBool] = None
    desc: Optional[str] = None
    safe: StrictBool


class SendToAddressResult(ResultSchema):
    """``sendtoaddress`` returns a bare txid, or an object when ``verbose`` is set."""

    scalar_field = "txid"

    txid: Txid
    fee_reason: Optional[str] = None


# ──────────────────────────────────────────────────────────────
# Descriptors
# ──────────────────────────────────────────────────────────────
class ImportDescriptorResponse(EmbeddedSchema):
    success: StrictBool
    warnings: List[str] = Field(default_factory=list)
    error: Optional[Dict[str, Any]] = None


class ImportDescriptorsResult(ResultSchema):
    """Per-descriptor outcome, in request order."""

    list_field = "responses"

    responses: List[ImportDescriptorResponse] = Field(default_factory=list)

    @property
    def all_succeeded(self) -> bool:
        return all(response.success for response in self.responses)


# ──────────────────────────────────────────────────────────────
# Signing
# ──────────────────────────────────────────────────────────────
class SignRawTransactionWithWalletResult(ResultSchema):
    hex: HexString
    complete: StrictBool
    errors: List[ScriptVerificationError] = Field(default_factory=list)
