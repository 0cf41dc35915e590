# btxrpc/api/blockchain.py
from typing import Any, Union

from btxrpc.api.base import Context, Params
from btxrpc.methods import blockchain as m


class Blockchain(Context):
    async def get_block(
        self, params: Params = None, **opts: Any
    ) -> Union[str, m.GetBlockResultV1, m.GetBlockResultV2]:
        """Raw hex at verbosity 0, txids at 1 (the default), decoded transactions at 2."""
        return await self._call(m.GetBlock, params, **opts)

    async def get_block_count(self, params: Params = None, **opts: Any) -> int:
        return await self._call(m.GetBlockCount, params, **opts)

    async def get_blockchain_info(self, params: Params = None, **opts: Any) -> m.GetBlockchainInfoResult:
        return await self._call(m.GetBlockchainInfo, params, **opts)

    async def get_mempool_entry(self, params: Params = None, **opts: Any) -> m.GetMempoolEntryResult:
        return await self._call(m.GetMempoolEntry, params, **opts)
