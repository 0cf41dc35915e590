# btxrpc/client/rpc_client.py
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from btxrpc.api.base import Params, invoke
from btxrpc.api.blockchain import Blockchain
from btxrpc.api.mining import Mining
from btxrpc.api.raw_transactions import RawTransactions
from btxrpc.api.utils import Utils
from btxrpc.api.wallets import Wallets
from btxrpc.client.client import JSONRPCTransport
from btxrpc.config import default
from btxrpc.core.registry import registry


# ──────────────────────────────────────────────────────────────
# Logging
# ──────────────────────────────────────────────────────────────
def configure_logging(level: str | int = "INFO"):
    logger = logging.getLogger("btxrpc")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)


# ──────────────────────────────────────────────────────────────
# Settings
# ──────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ClientSettings:
    base_url: str = default.BASE_URL
    username: str | None = default.RPC_USER
    password: str | None = field(default=default.RPC_PASSWORD, repr=False)
    timeout: float = default.TIMEOUT
    log_level: str | int = default.LOG_LEVEL
    headers: Dict[str, str] = field(default_factory=dict)


# ──────────────────────────────────────────────────────────────
# Main Client Class
# ──────────────────────────────────────────────────────────────
class RPCClient:
    """
    Typed Bitcoin Core client.

    Calls are grouped by context, mirroring the Bitcoin Core RPC help:

        async with RPCClient({"base_url": "http://localhost:18443"}) as client:
            balance = await client.wallets.get_balance({"wallet_name": "alice"})
            info = await client.blockchain.get_blockchain_info()
    """

    def __init__(
        self,
        settings: ClientSettings | dict | None = None,
        *,
        transport: Optional[JSONRPCTransport] = None,
    ):
        # normalize settings: accept dataclass or dict or None
        if settings is None:
            self._settings: ClientSettings = ClientSettings()
        elif isinstance(settings, ClientSettings):
            self._settings = settings
        elif isinstance(settings, dict):
            self._settings = ClientSettings(**settings)
        else:
            raise TypeError("settings must be ClientSettings | dict | None")

        configure_logging(self._settings.log_level)
        self._logger = logging.getLogger("btxrpc.client")

        self._transport = transport or JSONRPCTransport(
            self._settings.base_url,
            username=self._settings.username,
            password=self._settings.password,
            timeout=self._settings.timeout,
            headers=self._settings.headers,
        )

        self.wallets = Wallets(self._transport)
        self.blockchain = Blockchain(self._transport)
        self.raw_transactions = RawTransactions(self._transport)
        self.mining = Mining(self._transport)
        self.utils = Utils(self._transport)

        self._logger.info(f"Initialized client for {self._transport.url}")

    # ───── Properties ─────
    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def transport(self) -> JSONRPCTransport:
        return self._transport

    # ───── Generic call ─────
    async def call(self, method: str, params: Params = None, **opts: Any) -> Any:
        """
        Call any registered method by its RPC name, e.g. ``call("getbalance", {"minconf": 1})``.
        Unknown names fail locally with ``method_not_found``.
        """
        entry = registry.get(method)
        return await invoke(self._transport, entry.request, params, **opts)

    def list_methods(self) -> Dict[str, dict]:
        return registry.list_methods()

    # ───── Lifecycle ─────
    async def close(self):
        await self._transport.close()

    async def __aenter__(self) -> "RPCClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
