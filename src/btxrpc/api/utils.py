# btxrpc/api/utils.py
from typing import Any

from btxrpc.api.base import Context, Params
from btxrpc.methods import utils as m


class Utils(Context):
    async def validate_address(self, params: Params = None, **opts: Any) -> m.ValidateAddressResult:
        return await self._call(m.ValidateAddress, params, **opts)

    async def get_descriptor_info(self, params: Params = None, **opts: Any) -> m.GetDescriptorInfoResult:
        return await self._call(m.GetDescriptorInfo, params, **opts)
