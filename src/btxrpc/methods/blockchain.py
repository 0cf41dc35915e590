# btxrpc/methods/blockchain.py
"""Blockchain RPC methods: requests and their typed results."""
from typing import Annotated, Any, Dict, List, Optional, Union
from pydantic import Field, StrictBool, StrictFloat, StrictInt

from btxrpc.core.registry import register
from btxrpc.core.schema import EmbeddedSchema, RequestSchema, ResultSchema
from btxrpc.core.validators import Hex8, Hex64, Txid, one_of
from btxrpc.errors import ShapeMismatchError
from btxrpc.methods.raw_transaction_results import GetRawTransactionResult


# ──────────────────────────────────────────────────────────────
# Blocks
# ──────────────────────────────────────────────────────────────
class GetBlockResultV1(ResultSchema):
    """``getblock`` at verbosity 1: header fields plus the list of txids."""

    hash: Optional[Hex64] = None
    confirmations: Optional[StrictInt] = None
    size: Optional[StrictInt] = Field(None, gt=0)
    strippedsize: Optional[StrictInt] = Field(None, gt=0)
    weight: Optional[StrictInt] = Field(None, gt=0)
    height: Optional[StrictInt] = Field(None, ge=0)
    version: Optional[StrictInt] = Field(None, ge=0)
    version_hex: Optional[Hex8] = None
    merkleroot: Optional[Hex64] = None
    tx: List[str] = Field(default_factory=list)
    time: Optional[StrictInt] = Field(None, ge=0)
    mediantime: Optional[StrictInt] = Field(None, ge=0)
    nonce: Optional[StrictInt] = Field(None, ge=0)
    bits: Optional[Hex8] = None
    difficulty: Optional[StrictFloat] = Field(None, ge=0)
    chainwork: Optional[Hex64] = None
    n_tx: Optional[StrictInt] = Field(None, ge=0)
    previousblockhash: Optional[Hex64] = None
    nextblockhash: Optional[Hex64] = None


class GetBlockResultV2(GetBlockResultV1):
    """``getblock`` at verbosity 2: every transaction decoded."""

    tx: List[GetRawTransactionResult] = Field(default_factory=list)


def _parse_block(raw: Any, request: "GetBlock") -> Any:
    if request.verbosity == 0:
        if not isinstance(raw, str):
            raise ShapeMismatchError(request.method, raw)
        return raw
    if request.verbosity == 1:
        return GetBlockResultV1.parse_or_raise(raw)
    return GetBlockResultV2.parse_or_raise(raw)


@register(result=_parse_block)
class GetBlock(RequestSchema):
    """A block as hex (0), with txids (1) or with decoded transactions (2)."""

    method = "getblock"

    blockhash: Hex64
    verbosity: Annotated[StrictInt, one_of(0, 1, 2)] = 1

    def params(self) -> List[Any]:
        return [self.blockhash, self.verbosity]


@register()
class GetBlockCount(RequestSchema):
    """Height of the most-work fully-validated chain."""

    method = "getblockcount"

    def params(self) -> List[Any]:
        return []


# ──────────────────────────────────────────────────────────────
# Chain state
# ──────────────────────────────────────────────────────────────
class Bip9Statistics(EmbeddedSchema):
    period: Optional[StrictInt] = Field(None, ge=0)
    threshold: Optional[StrictInt] = Field(None, ge=0)
    elapsed: Optional[StrictInt] = Field(None, ge=0)
    count: Optional[StrictInt] = Field(None, ge=0)
    possible: Optional[StrictBool] = None


class Bip9(EmbeddedSchema):
    status: Annotated[str, one_of("defined", "started", "locked_in", "active", "failed")]
    bit: Optional[StrictInt] = Field(None, ge=0)
    start_time: Optional[StrictInt] = None
    timeout: Optional[StrictInt] = None
    since: Optional[StrictInt] = Field(None, ge=0)
    min_activation_height: Optional[StrictInt] = Field(None, ge=0)
    statistics: Optional[Bip9Statistics] = None


class Softfork(EmbeddedSchema):
    type: Annotated[str, one_of("buried", "bip9")]
    active: StrictBool
    height: Optional[StrictInt] = Field(None, ge=0)
    bip9: Optional[Bip9] = None


class GetBlockchainInfoResult(ResultSchema):
    """Chain tip, sync progress and softfork deployment state."""

    chain: Optional[str] = None
    blocks: Optional[StrictInt] = Field(None, ge=0)
    headers: Optional[StrictInt] = Field(None, ge=0)
    bestblockhash: Optional[Hex64] = None
    difficulty: Optional[StrictFloat] = Field(None, ge=0)
    time: Optional[StrictInt] = Field(None, ge=0)
    mediantime: Optional[StrictInt] = Field(None, ge=0)
    verificationprogress: Optional[StrictFloat] = Field(None, ge=0)
    initialblockdownload: Optional[StrictBool] = None
    chainwork: Optional[Hex64] = None
    size_on_disk: Optional[StrictInt] = Field(None, ge=0)
    pruned: Optional[StrictBool] = None
    pruneheight: Optional[StrictInt] = Field(None, ge=0)
    automatic_pruning: Optional[StrictBool] = None
    prune_target_size: Optional[StrictInt] = Field(None, ge=0)
    softforks: Dict[str, Softfork] = Field(default_factory=dict)
    # a string up to v28, a list of strings since
    warnings: Optional[Union[str, List[str]]] = None


@register(result=GetBlockchainInfoResult)
class GetBlockchainInfo(RequestSchema):
    """State of the block chain."""

    method = "getblockchaininfo"

    def params(self) -> List[Any]:
        return []


# ──────────────────────────────────────────────────────────────
# Mempool
# ──────────────────────────────────────────────────────────────
class GetMempoolEntryFees(EmbeddedSchema):
    base: StrictFloat = Field(ge=0)
    modified: StrictFloat = Field(ge=0)
    ancestor: StrictFloat = Field(ge=0)
    descendant: StrictFloat = Field(ge=0)


class GetMempoolEntryResult(ResultSchema):
    vsize: StrictInt = Field(gt=0)
    weight: StrictInt = Field(gt=0)
    fee: Optional[StrictFloat] = Field(None, ge=0)
    modifiedfee: Optional[StrictFloat] = Field(None, ge=0)
    time: StrictInt = Field(gt=0)
    height: StrictInt = Field(ge=0)
    descendantcount: StrictInt = Field(gt=0)
    descendantsize: StrictInt = Field(gt=0)
    descendantfees: Optional[StrictFloat] = Field(None, ge=0)
    ancestorcount: StrictInt = Field(gt=0)
    ancestorsize: StrictInt = Field(gt=0)
    ancestorfees: Optional[StrictFloat] = Field(None, ge=0)
    wtxid: Hex64
    fees: GetMempoolEntryFees
    depends: List[str] = Field(default_factory=list)
    spentby: List[str] = Field(default_factory=list)
    bip125_replaceable: Optional[StrictBool] = None
    unbroadcast: Optional[StrictBool] = None


@register(result=GetMempoolEntryResult)
class GetMempoolEntry(RequestSchema):
    """Mempool data for a transaction."""

    method = "getmempoolentry"

    txid: Txid

    def params(self) -> List[Any]:
        return [self.txid]
