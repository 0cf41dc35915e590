# btxrpc/methods/wallets.py
"""Request schemas for the wallet RPC methods."""
from typing import Annotated, Any, List, Optional
from pydantic import Field, StrictBool, StrictFloat, StrictInt, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from btxrpc.core.registry import list_of, register
from btxrpc.core.schema import EmbeddedSchema, RequestSchema
from btxrpc.core.types import DescRange, DescTimestamp
from btxrpc.core.validators import (
    ADDRESS_TYPES,
    Address,
    AddressList,
    EstimateMode,
    RequiredHexString,
    SighashType,
    Txid,
    WalletName,
    one_of,
)
from btxrpc.methods.common import PrevTx
from btxrpc.methods.wallet_results import (
    CreateWalletResult,
    GetAddressInfoResult,
    GetBalancesResult,
    GetTransactionResult,
    GetWalletInfoResult,
    ImportDescriptorsResult,
    ListTransactionsItem,
    ListUnspentItem,
    LoadWalletResult,
    SendToAddressResult,
    SignRawTransactionWithWalletResult,
    UnloadWalletResult,
)

Passphrase = Annotated[str, Field(min_length=1, max_length=1024)]


class WalletRequest(RequestSchema):
    """Methods that run against one wallet of a multi-wallet node."""

    wallet_scoped = True

    wallet_name: Optional[WalletName] = None


# ──────────────────────────────────────────────────────────────
# Wallet lifecycle
# ──────────────────────────────────────────────────────────────
@register(result=CreateWalletResult)
class CreateWallet(RequestSchema):
    """Create and load a new wallet."""

    method = "createwallet"
    # every position is sent, including a null load_on_startup
    trim_params = False

    wallet_name: WalletName
    disable_private_keys: StrictBool = False
    blank: StrictBool = False
    passphrase: Optional[Passphrase] = None
    avoid_reuse: StrictBool = False
    descriptors: StrictBool = False
    load_on_startup: Optional[StrictBool] = None

    def params(self) -> List[Any]:
        return [
            self.wallet_name,
            self.disable_private_keys,
            self.blank,
            self.passphrase,
            self.avoid_reuse,
            self.descriptors,
            self.load_on_startup,
        ]


@register(result=LoadWalletResult)
class LoadWallet(RequestSchema):
    """Load a wallet from a wallet file or directory."""

    method = "loadwallet"

    filename: str = Field(min_length=1, max_length=255)
    load_on_startup: Optional[StrictBool] = None

    def params(self) -> List[Any]:
        return [self.filename, self.load_on_startup]


@register(result=UnloadWalletResult)
class UnloadWallet(RequestSchema):
    """Unload a wallet by name."""

    method = "unloadwallet"

    wallet_name: WalletName
    load_on_startup: Optional[StrictBool] = None

    def params(self) -> List[Any]:
        return [self.wallet_name, self.load_on_startup]


@register(result=list_of())
class ListWallets(RequestSchema):
    """Names of the currently loaded wallets."""

    method = "listwallets"

    def params(self) -> List[Any]:
        return []


@register(result=GetWalletInfoResult)
class GetWalletInfo(WalletRequest):
    """Wallet state and key-pool information."""

    method = "getwalletinfo"

    def params(self) -> List[Any]:
        return []


# ──────────────────────────────────────────────────────────────
# Balances
# ──────────────────────────────────────────────────────────────
@register()
class GetBalance(WalletRequest):
    """Total available balance."""

    method = "getbalance"

    dummy: Annotated[str, one_of("*")] = "*"
    minconf: StrictInt = Field(0, ge=0)
    include_watchonly: StrictBool = True
    avoid_reuse: StrictBool = True

    def params(self) -> List[Any]:
        return [self.dummy, self.minconf, self.include_watchonly, self.avoid_reuse]


@register(result=GetBalancesResult)
class GetBalances(WalletRequest):
    """All balances, in BTC."""

    method = "getbalances"

    def params(self) -> List[Any]:
        return []


# ──────────────────────────────────────────────────────────────
# Encryption
# ──────────────────────────────────────────────────────────────
@register()
class WalletPassphrase(WalletRequest):
    """Unlock the wallet for ``timeout`` seconds."""

    method = "walletpassphrase"

    passphrase: Passphrase
    timeout: StrictInt = Field(gt=0, le=100_000_000)

    def params(self) -> List[Any]:
        return [self.passphrase, self.timeout]


@register()
class WalletLock(WalletRequest):
    """Remove the wallet encryption key from memory."""

    method = "walletlock"

    def params(self) -> List[Any]:
        return []


# ──────────────────────────────────────────────────────────────
# Addresses
# ──────────────────────────────────────────────────────────────
@register()
class GetNewAddress(WalletRequest):
    """A new address for receiving payments."""

    method = "getnewaddress"

    label: str = Field("", max_length=255)
    address_type: Optional[Annotated[str, one_of(*ADDRESS_TYPES)]] = None

    def params(self) -> List[Any]:
        return [self.label, self.address_type]


@register(result=GetAddressInfoResult)
class GetAddressInfo(WalletRequest):
    """Information about a Bitcoin address."""

    method = "getaddressinfo"

    address: Address

    def params(self) -> List[Any]:
        return [self.address]


@register()
class GetAddressesByLabel(WalletRequest):
    """Addresses assigned to a label."""

    method = "getaddressesbylabel"
    # "" is the default label, not a missing one
    keep_empty = frozenset({"label"})

    label: str = Field(max_length=64)

    def params(self) -> List[Any]:
        return [self.label]


@register()
class GetReceivedByAddress(WalletRequest):
    """Total amount received by an address with at least ``minconf`` confirmations."""

    method = "getreceivedbyaddress"

    address: Address
    minconf: StrictInt = Field(1, ge=0)

    def params(self) -> List[Any]:
        return [self.address, self.minconf]


# ──────────────────────────────────────────────────────────────
# Sending and history
# ──────────────────────────────────────────────────────────────
@register(result=SendToAddressResult)
class SendToAddress(WalletRequest):
    """Send an amount to an address."""

    method = "sendtoaddress"

    address: Address
    amount: StrictFloat = Field(gt=0)
    comment: Optional[str] = Field(None, max_length=1024)
    comment_to: Optional[str] = Field(None, max_length=1024)
    subtract_fee_from_amount: StrictBool = False
    replaceable: Optional[StrictBool] = None
    conf_target: Optional[StrictInt] = Field(None, gt=0)
    estimate_mode: EstimateMode = "unset"
    avoid_reuse: StrictBool = True
    fee_rate: Optional[StrictFloat] = Field(None, gt=0)
    verbose: StrictBool = False

    def params(self) -> List[Any]:
        return [
            self.address,
            self.amount,
            self.comment,
            self.comment_to,
            self.subtract_fee_from_amount,
            self.replaceable,
            self.conf_target,
            self.estimate_mode,
            self.avoid_reuse,
            self.fee_rate,
            self.verbose,
        ]


@register(result=GetTransactionResult)
class GetTransaction(WalletRequest):
    """Detailed information about an in-wallet transaction."""

    method = "gettransaction"

    txid: Txid
    include_watchonly: StrictBool = True
    verbose: StrictBool = False

    def params(self) -> List[Any]:
        return [self.txid, self.include_watchonly, self.verbose]


@register(result=list_of(ListTransactionsItem))
class ListTransactions(WalletRequest):
    """Most recent wallet transactions, skipping the first ``skip``."""

    method = "listtransactions"

    label: Optional[str] = Field(None, max_length=255)
    count: StrictInt = Field(10, gt=0)
    skip: StrictInt = Field(0, ge=0)
    include_watchonly: Optional[StrictBool] = None

    def params(self) -> List[Any]:
        return [self.label, self.count, self.skip, self.include_watchonly]


class ListUnspentQueryOptions(EmbeddedSchema):
    minimum_amount: Optional[StrictFloat] = Field(None, ge=0, serialization_alias="minimumAmount")
    maximum_amount: Optional[StrictFloat] = Field(None, ge=0, serialization_alias="maximumAmount")
    maximum_count: Optional[StrictInt] = Field(None, ge=1, serialization_alias="maximumCount")
    minimum_sum_amount: Optional[StrictFloat] = Field(None, ge=0, serialization_alias="minimumSumAmount")


@register(result=list_of(ListUnspentItem))
class ListUnspent(WalletRequest):
    """Unspent outputs with between ``minconf`` and ``maxconf`` confirmations."""

    method = "listunspent"
    trim_params = False

    minconf: StrictInt = Field(1, ge=0)
    maxconf: StrictInt = Field(9_999_999, ge=0)
    addresses: AddressList = Field(default_factory=list)
    include_unsafe: StrictBool = True
    query_options: Optional[ListUnspentQueryOptions] = None

    def params(self) -> List[Any]:
        return [
            self.minconf,
            self.maxconf,
            list(self.addresses),
            self.include_unsafe,
            self.query_options.to_params() if self.query_options else None,
        ]


# ──────────────────────────────────────────────────────────────
# Descriptors
# ──────────────────────────────────────────────────────────────
class ImportDescriptorRequest(EmbeddedSchema):
    """One descriptor to import, with its rescan timestamp."""

    desc: str = Field(min_length=1)
    active: StrictBool = False
    range: Optional[DescRange] = None
    next_index: Optional[StrictInt] = Field(None, ge=0)
    timestamp: DescTimestamp
    internal: StrictBool = False
    label: str = ""

    @field_validator("label")
    @classmethod
    def _label_not_internal(cls, value: str, info: ValidationInfo) -> str:
        if value and info.data.get("internal"):
            raise PydanticCustomError("internal_label", "not allowed when internal=true")
        return value


@register(result=ImportDescriptorsResult)
class ImportDescriptors(WalletRequest):
    """Import descriptors, rescanning from the earliest timestamp."""

    method = "importdescriptors"

    requests: List[ImportDescriptorRequest] = Field(min_length=1)

    @field_validator("requests", mode="before")
    @classmethod
    def _at_least_one(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)) and not value:
            raise PydanticCustomError("too_short", "at least one request is required", {"min_length": 1})
        return value

    def params(self) -> List[Any]:
        return [[request.to_params() for request in self.requests]]


# ──────────────────────────────────────────────────────────────
# Signing
# ──────────────────────────────────────────────────────────────
@register(result=SignRawTransactionWithWalletResult)
class SignRawTransactionWithWallet(WalletRequest):
    """Sign the inputs of a raw transaction with the wallet's keys."""

    method = "signrawtransactionwithwallet"

    hexstring: RequiredHexString
    prevtxs: Optional[List[PrevTx]] = None
    sighashtype: SighashType = "ALL"

    def params(self) -> List[Any]:
        prevtxs = [prevtx.to_params() for prevtx in self.prevtxs] if self.prevtxs else None
        return [self.hexstring, prevtxs, self.sighashtype]
