# btxrpc/methods/raw_transactions.py
"""Request schemas for the raw-transaction RPC methods."""
from typing import Annotated, Any, List, Optional
from pydantic import Field, StrictBool, StrictFloat, StrictInt, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from btxrpc.core.registry import register
from btxrpc.core.schema import EmbeddedSchema, RequestSchema
from btxrpc.core.validators import (
    Address,
    EstimateMode,
    Hex64,
    OutputIndexList,
    PrivKeyList,
    RequiredHexString,
    SighashType,
    Txid,
    one_of,
)
from btxrpc.errors import ShapeMismatchError
from btxrpc.methods.common import Input, Output, PrevTx
from btxrpc.methods.raw_transaction_results import (
    DecodeRawTransactionResult,
    FundRawTransactionResult,
    GetRawTransactionResult,
    SignRawTransactionWithKeyResult,
)
from btxrpc.methods.wallets import WalletRequest


def _parse_raw_transaction(raw: Any, request: "GetRawTransaction") -> Any:
    if request.verbose:
        return GetRawTransactionResult.parse_or_raise(raw)
    if not isinstance(raw, str):
        raise ShapeMismatchError(request.method, raw)
    return raw


@register()
class CreateRawTransaction(RequestSchema):
    """Create an unsigned transaction spending ``inputs``; returns its hex."""

    method = "createrawtransaction"

    inputs: List[Input]
    outputs: Output
    locktime: StrictInt = Field(0, ge=0)
    replaceable: StrictBool = False

    def params(self) -> List[Any]:
        return [
            [item.to_params() for item in self.inputs],
            self.outputs.to_params(),
            self.locktime,
            self.replaceable,
        ]


@register(result=DecodeRawTransactionResult)
class DecodeRawTransaction(RequestSchema):
    """Decode a serialized transaction."""

    method = "decoderawtransaction"

    hexstring: RequiredHexString
    iswitness: Optional[StrictBool] = None

    def params(self) -> List[Any]:
        return [self.hexstring, self.iswitness]


class FundRawTransactionOptions(EmbeddedSchema):
    """Coin selection and fee options for ``fundrawtransaction``."""

    add_inputs: StrictBool = True
    change_address: Optional[Address] = Field(None, serialization_alias="changeAddress")
    change_position: Optional[StrictInt] = Field(None, ge=0, serialization_alias="changePosition")
    change_type: Optional[Annotated[str, one_of("legacy", "p2sh-segwit", "bech32")]] = None
    include_watching: Optional[StrictBool] = Field(None, serialization_alias="includeWatching")
    lock_unspents: StrictBool = Field(False, serialization_alias="lockUnspents")
    # sat/vB and BTC/kvB respectively; fee_rate is checked last so the conflict lands on it
    fee_rate_btc: Optional[StrictFloat] = Field(None, gt=0, serialization_alias="feeRate")
    fee_rate: Optional[StrictFloat] = Field(None, gt=0)
    subtract_fee_from_outputs: OutputIndexList = Field(
        default_factory=list, serialization_alias="subtractFeeFromOutputs"
    )
    replaceable: Optional[StrictBool] = None
    conf_target: Optional[StrictInt] = Field(None, gt=0)
    estimate_mode: Optional[EstimateMode] = None

    @field_validator("fee_rate")
    @classmethod
    def _single_fee_rate(cls, value: Optional[float], info: ValidationInfo) -> Optional[float]:
        if value is not None and info.data.get("fee_rate_btc") is not None:
            raise PydanticCustomError("exclusion", "cannot specify both fee_rate and fee_rate_btc")
        return value


@register(result=FundRawTransactionResult)
class FundRawTransaction(WalletRequest):
    """Add inputs (and a change output) until the transaction's outputs are covered."""

    method = "fundrawtransaction"

    hexstring: RequiredHexString
    options: Optional[FundRawTransactionOptions] = None
    iswitness: Optional[StrictBool] = None

    def params(self) -> List[Any]:
        options = self.options.to_params() if self.options else None
        return [self.hexstring, options, self.iswitness]


@register(result=_parse_raw_transaction)
class GetRawTransaction(RequestSchema):
    """A transaction as hex, or decoded when ``verbose`` is set."""

    method = "getrawtransaction"

    txid: Txid
    verbose: StrictBool = False
    blockhash: Optional[Hex64] = None

    def params(self) -> List[Any]:
        return [self.txid, self.verbose, self.blockhash]


@register()
class SendRawTransaction(RequestSchema):
    """Broadcast a signed transaction; returns its txid."""

    method = "sendrawtransaction"

    hexstring: RequiredHexString
    maxfeerate: StrictFloat = Field(0.10, ge=0)

    def params(self) -> List[Any]:
        return [self.hexstring, self.maxfeerate]


@register(result=SignRawTransactionWithKeyResult)
class SignRawTransactionWithKey(RequestSchema):
    """Sign the inputs of a raw transaction with the given WIF keys."""

    method = "signrawtransactionwithkey"

    hexstring: RequiredHexString
    privkeys: PrivKeyList
    prevtxs: Optional[List[PrevTx]] = None
    sighashtype: SighashType = "ALL"

    def params(self) -> List[Any]:
        prevtxs = [prevtx.to_params() for prevtx in self.prevtxs] if self.prevtxs else None
        return [self.hexstring, list(self.privkeys), prevtxs, self.sighashtype]
