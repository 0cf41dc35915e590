# btxrpc/methods/utils.py
from typing import Any, List, Optional
from pydantic import Field, StrictBool, StrictInt

from btxrpc.core.registry import register
from btxrpc.core.schema import RequestSchema, ResultSchema
from btxrpc.core.validators import Address, HexString


class ValidateAddressResult(ResultSchema):
    isvalid: StrictBool
    address: Optional[str] = None
    script_pub_key: Optional[HexString] = None
    isscript: Optional[StrictBool] = None
    iswitness: Optional[StrictBool] = None
    witness_version: Optional[StrictInt] = Field(None, ge=0)
    witness_program: Optional[HexString] = None
    error: Optional[str] = None
    error_locations: List[StrictInt] = Field(default_factory=list)


class GetDescriptorInfoResult(ResultSchema):
    descriptor: str
    checksum: str
    isrange: StrictBool
    issolvable: StrictBool
    hasprivatekeys: StrictBool


@register(result=ValidateAddressResult)
class ValidateAddress(RequestSchema):
    """Whether an address is valid, with its script details."""

    method = "validateaddress"

    address: Address

    def params(self) -> List[Any]:
        return [self.address]


@register(result=GetDescriptorInfoResult)
class GetDescriptorInfo(RequestSchema):
    """Analyse a descriptor and return it with its checksum."""

    method = "getdescriptorinfo"

    descriptor: str = Field(min_length=1)

    def params(self) -> List[Any]:
        return [self.descriptor]
