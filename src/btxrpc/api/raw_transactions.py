# btxrpc/api/raw_transactions.py
from typing import Any, Union

from btxrpc.api.base import Context, Params
from btxrpc.methods import raw_transactions as m
from btxrpc.methods.raw_transaction_results import (
    DecodeRawTransactionResult,
    FundRawTransactionResult,
    GetRawTransactionResult,
    SignRawTransactionWithKeyResult,
)


class RawTransactions(Context):
    """Raw transaction RPCs: build, fund, sign, decode and broadcast."""

    async def create_raw_transaction(self, params: Params = None, **opts: Any) -> str:
        return await self._call(m.CreateRawTransaction, params, **opts)

    async def decode_raw_transaction(self, params: Params = None, **opts: Any) -> DecodeRawTransactionResult:
        return await self._call(m.DecodeRawTransaction, params, **opts)

    async def fund_raw_transaction(self, params: Params = None, **opts: Any) -> FundRawTransactionResult:
        return await self._call(m.FundRawTransaction, params, **opts)

    async def get_raw_transaction(
        self, params: Params = None, **opts: Any
    ) -> Union[str, GetRawTransactionResult]:
        """Hex string, or :class:`GetRawTransactionResult` when ``verbose`` is set."""
        return await self._call(m.GetRawTransaction, params, **opts)

    async def send_raw_transaction(self, params: Params = None, **opts: Any) -> str:
        return await self._call(m.SendRawTransaction, params, **opts)

    async def sign_raw_transaction_with_key(
        self, params: Params = None, **opts: Any
    ) -> SignRawTransactionWithKeyResult:
        return await self._call(m.SignRawTransactionWithKey, params, **opts)
