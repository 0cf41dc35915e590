# btxrpc/methods/common.py
"""Transaction sub-structures shared by the wallet and raw-transaction methods."""
from typing import Annotated, Any, Dict, List, Optional
from pydantic import Field, StrictFloat, StrictInt

from btxrpc.core.schema import EmbeddedSchema
from btxrpc.core.validators import (
    Address,
    HexString,
    RequiredHexString,
    Txid,
    one_of,
)

SCRIPT_TYPES = (
    "nonstandard",
    "pubkey",
    "pubkeyhash",
    "scripthash",
    "multisig",
    "nulldata",
    "witness_v0_keyhash",
    "witness_v0_scripthash",
    "witness_v1_taproot",
    "witness_unknown",
)

ScriptType = Annotated[str, one_of(*SCRIPT_TYPES)]


# ──────────────────────────────────────────────────────────────
# Request side
# ──────────────────────────────────────────────────────────────
class PrevTx(EmbeddedSchema):
    """A previous output the transaction being signed depends on."""

    txid: Txid
    vout: StrictInt = Field(ge=0)
    script_pub_key: RequiredHexString = Field(serialization_alias="scriptPubKey")
    redeem_script: Optional[HexString] = Field(None, serialization_alias="redeemScript")
    witness_script: Optional[HexString] = Field(None, serialization_alias="witnessScript")
    amount: Optional[StrictFloat] = Field(None, gt=0)


class Input(EmbeddedSchema):
    txid: Txid
    vout: StrictInt = Field(ge=0)
    sequence: Optional[StrictInt] = Field(None, ge=0)


class OutputAddress(EmbeddedSchema):
    address: Address
    amount: StrictFloat = Field(gt=0)


class Output(EmbeddedSchema):
    """Outputs of a new transaction: address/amount pairs plus an optional data carrier."""

    addresses: List[OutputAddress] = Field(default_factory=list)
    data: Optional[HexString] = None

    def to_params(self) -> List[Dict[str, Any]]:
        # one single-key object per output keeps the caller's ordering on the wire
        outputs: List[Dict[str, Any]] = [{entry.address: entry.amount} for entry in self.addresses]
        if self.data is not None:
            outputs.append({"data": self.data})
        return outputs


# ──────────────────────────────────────────────────────────────
# Result side
# ──────────────────────────────────────────────────────────────
class ScriptVerificationError(EmbeddedSchema):
    txid: Txid
    vout: StrictInt = Field(ge=0)
    script_sig: Optional[HexString] = None
    sequence: Optional[StrictInt] = Field(None, ge=0)
    error: str


class ScriptSig(EmbeddedSchema):
    asm: str
    hex: HexString


class ScriptPubKey(EmbeddedSchema):
    asm: str
    hex: HexString
    req_sigs: Optional[StrictInt] = Field(None, ge=0)
    type: Optional[ScriptType] = None
    address: Optional[str] = None
    addresses: List[str] = Field(default_factory=list)
    desc: Optional[str] = None


class Vin(EmbeddedSchema):
    # coinbase inputs carry ``coinbase`` instead of txid/vout/scriptSig
    txid: Optional[Txid] = None
    vout: Optional[StrictInt] = Field(None, ge=0)
    coinbase: Optional[HexString] = None
    script_sig: Optional[ScriptSig] = None
    txinwitness: List[str] = Field(default_factory=list)
    sequence: StrictInt = Field(ge=0)


class Vout(EmbeddedSchema):
    value: StrictFloat = Field(ge=0)
    n: StrictInt = Field(ge=0)
    script_pub_key: ScriptPubKey
