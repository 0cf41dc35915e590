# btxrpc/methods/raw_transaction_results.py
"""Typed results of the raw-transaction RPC methods."""
from typing import List, Optional
from pydantic import Field, StrictBool, StrictFloat, StrictInt, field_validator
from pydantic_core import PydanticCustomError

from btxrpc.core.schema import ResultSchema
from btxrpc.core.validators import Hex64, HexString, Txid
from btxrpc.methods.common import ScriptVerificationError, Vin, Vout


class DecodeRawTransactionResult(ResultSchema):
    txid: Txid
    hash: Hex64
    size: StrictInt = Field(gt=0)
    vsize: StrictInt = Field(gt=0)
    weight: StrictInt = Field(gt=0)
    version: StrictInt = Field(ge=0)
    locktime: StrictInt = Field(ge=0)
    vin: List[Vin] = Field(default_factory=list)
    vout: List[Vout] = Field(default_factory=list)


class GetRawTransactionResult(ResultSchema):
    """Decoded transaction; block fields are only present once it is mined."""

    in_active_chain: Optional[StrictBool] = None
    hex: Optional[HexString] = None
    txid: Txid
    hash: Optional[Hex64] = None
    size: Optional[StrictInt] = Field(None, gt=0)
    vsize: Optional[StrictInt] = Field(None, gt=0)
    weight: Optional[StrictInt] = Field(None, gt=0)
    version: Optional[StrictInt] = Field(None, ge=0)
    locktime: Optional[StrictInt] = Field(None, ge=0)
    vin: List[Vin] = Field(default_factory=list)
    vout: List[Vout] = Field(default_factory=list)
    blockhash: Optional[Hex64] = None
    confirmations: Optional[StrictInt] = Field(None, ge=0)
    blocktime: Optional[StrictInt] = Field(None, ge=0)
    time: Optional[StrictInt] = Field(None, ge=0)


class FundRawTransactionResult(ResultSchema):
    hex: HexString
    fee: StrictFloat = Field(ge=0)
    changepos: StrictInt

    @field_validator("changepos")
    @classmethod
    def _change_position(cls, value: int) -> int:
        if value < -1:
            raise PydanticCustomError(
                "greater_than_equal",
                "must be -1 (no change) or a non-negative integer",
                {"ge": -1},
            )
        return value


class SignRawTransactionWithKeyResult(ResultSchema):
    hex: HexString
    complete: StrictBool
    errors: List[ScriptVerificationError] = Field(default_factory=list)
