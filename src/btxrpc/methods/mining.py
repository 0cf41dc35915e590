# btxrpc/methods/mining.py
from typing import Any, List
from pydantic import Field, StrictInt

from btxrpc.core.registry import list_of, register
from btxrpc.core.schema import RequestSchema
from btxrpc.core.validators import Address


@register(result=list_of())
class GenerateToAddress(RequestSchema):
    """Mine ``nblocks`` blocks to ``address`` (regtest); returns the block hashes."""

    method = "generatetoaddress"

    nblocks: StrictInt = Field(gt=0)
    address: Address
    maxtries: StrictInt = Field(1_000_000, gt=0)

    def params(self) -> List[Any]:
        return [self.nblocks, self.address, self.maxtries]
