# btxrpc/api/mining.py
from typing import Any, List

from btxrpc.api.base import Context, Params
from btxrpc.methods import mining as m


class Mining(Context):
    async def generate_to_address(self, params: Params = None, **opts: Any) -> List[str]:
        return await self._call(m.GenerateToAddress, params, **opts)
