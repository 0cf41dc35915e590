# btxrpc/api/wallets.py
from typing import Any, Dict, List

from btxrpc.api.base import Context, Params
from btxrpc.methods import wallets as m
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


class Wallets(Context):
    """
    Wallet RPCs.

    Every method takes the RPC's named params as a mapping or as keywords,
    plus the call options ``id`` and ``path``. Methods that accept
    ``wallet_name`` are sent to ``/wallet/<wallet_name>``.
    """

    # ───── Lifecycle ─────
    async def create_wallet(self, params: Params = None, **opts: Any) -> CreateWalletResult:
        return await self._call(m.CreateWallet, params, **opts)

    async def load_wallet(self, params: Params = None, **opts: Any) -> LoadWalletResult:
        return await self._call(m.LoadWallet, params, **opts)

    async def unload_wallet(self, params: Params = None, **opts: Any) -> UnloadWalletResult:
        return await self._call(m.UnloadWallet, params, **opts)

    async def list_wallets(self, params: Params = None, **opts: Any) -> List[str]:
        return await self._call(m.ListWallets, params, **opts)

    async def get_wallet_info(self, params: Params = None, **opts: Any) -> GetWalletInfoResult:
        return await self._call(m.GetWalletInfo, params, **opts)

    # ───── Balances ─────
    async def get_balance(self, params: Params = None, **opts: Any) -> float:
        return await self._call(m.GetBalance, params, **opts)

    async def get_balances(self, params: Params = None, **opts: Any) -> GetBalancesResult:
        return await self._call(m.GetBalances, params, **opts)

    # ───── Encryption ─────
    async def wallet_passphrase(self, params: Params = None, **opts: Any) -> None:
        return await self._call(m.WalletPassphrase, params, **opts)

    async def wallet_lock(self, params: Params = None, **opts: Any) -> None:
        return await self._call(m.WalletLock, params, **opts)

    # ───── Addresses ─────
    async def get_new_address(self, params: Params = None, **opts: Any) -> str:
        return await self._call(m.GetNewAddress, params, **opts)

    async def get_address_info(self, params: Params = None, **opts: Any) -> GetAddressInfoResult:
        return await self._call(m.GetAddressInfo, params, **opts)

    async def get_addresses_by_label(self, params: Params = None, **opts: Any) -> Dict[str, Any]:
        return await self._call(m.GetAddressesByLabel, params, **opts)

    async def get_received_by_address(self, params: Params = None, **opts: Any) -> float:
        return await self._call(m.GetReceivedByAddress, params, **opts)

    # ───── Transactions ─────
    async def send_to_address(self, params: Params = None, **opts: Any) -> SendToAddressResult:
        return await self._call(m.SendToAddress, params, **opts)

    async def get_transaction(self, params: Params = None, **opts: Any) -> GetTransactionResult:
        return await self._call(m.GetTransaction, params, **opts)

    async def list_transactions(self, params: Params = None, **opts: Any) -> List[ListTransactionsItem]:
        return await self._call(m.ListTransactions, params, **opts)

    async def list_unspent(self, params: Params = None, **opts: Any) -> List[ListUnspentItem]:
        return await self._call(m.ListUnspent, params, **opts)

    # ───── Descriptors and signing ─────
    async def import_descriptors(self, params: Params = None, **opts: Any) -> ImportDescriptorsResult:
        return await self._call(m.ImportDescriptors, params, **opts)

    async def sign_raw_transaction_with_wallet(
        self, params: Params = None, **opts: Any
    ) -> SignRawTransactionWithWalletResult:
        return await self._call(m.SignRawTransactionWithWallet, params, **opts)
