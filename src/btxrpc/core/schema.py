"""
Base classes for every request, result and embedded schema.

A schema is a frozen pydantic model. Validation runs once, in
``model_validate``; failures from every field are collected into a single
:class:`~btxrpc.errors.FieldValidationError`.

- :class:`RequestSchema` knows its RPC method and how to lay its fields out
  as positional params (:meth:`RequestSchema.encode`).
- :class:`ResultSchema` dispatches on the JSON type of a raw ``result``
  before casting it (:meth:`ResultSchema.parse`).
- :class:`EmbeddedSchema` is a sub-structure owned by one of the above.
"""
from functools import lru_cache
from typing import Any, ClassVar, Dict, FrozenSet, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, model_validator

from btxrpc.core.normalizer import normalize_attrs
from btxrpc.errors import FieldValidationError, ShapeMismatchError
from btxrpc.schemas import RPCRequest

S = TypeVar("S", bound="Schema")
R = TypeVar("R", bound="ResultSchema")


def trim_trailing_none(params: List[Any]) -> List[Any]:
    """Drop ``None`` from the tail only; gaps in the middle stay as null placeholders."""
    end = len(params)
    while end and params[end - 1] is None:
        end -= 1
    return list(params[:end])


class Schema(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    normalize_keys: ClassVar[bool] = False
    """Rename irregular Bitcoin Core keys before casting."""

    empty_as_absent: ClassVar[bool] = False
    """Treat ``""`` like a missing value, so defaults and required checks apply."""

    keep_empty: ClassVar[FrozenSet[str]] = frozenset()
    """Fields for which ``""`` is a real value even when ``empty_as_absent`` is set."""

    # ───── Input preparation ─────
    @model_validator(mode="before")
    @classmethod
    def prepare_input(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        if cls.normalize_keys:
            data = normalize_attrs(data)
        return {key: value for key, value in data.items() if not cls._is_absent(key, value)}

    @classmethod
    def _is_absent(cls, key: Any, value: Any) -> bool:
        if value is None:
            return True
        return (
            cls.empty_as_absent
            and isinstance(value, str)
            and value == ""
            and key not in cls.keep_empty
        )

    # ───── Build ─────
    @classmethod
    def build(cls: Type[S], attrs: Optional[Mapping[str, Any]] = None, **fields: Any) -> Union[S, FieldValidationError]:
        """Validate ``attrs``; return the instance, or the aggregated error as a value."""
        try:
            return cls.build_or_raise(attrs, **fields)
        except FieldValidationError as exc:
            return exc

    @classmethod
    def build_or_raise(cls: Type[S], attrs: Optional[Mapping[str, Any]] = None, **fields: Any) -> S:
        data = {**(attrs or {}), **fields}
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise FieldValidationError.from_validation_error(cls.__name__, exc) from None


class EmbeddedSchema(Schema):
    normalize_keys: ClassVar[bool] = True

    def to_params(self) -> Dict[str, Any]:
        """Wire form: serialization aliases applied, absent fields dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class RequestSchema(Schema):
    empty_as_absent: ClassVar[bool] = True

    method: ClassVar[str]
    """Bitcoin Core RPC method name."""

    trim_params: ClassVar[bool] = True
    """Drop trailing ``None`` params. Off for methods whose every position is sent."""

    wallet_scoped: ClassVar[bool] = False
    """Post to ``/wallet/<wallet_name>`` when ``wallet_name`` is set."""

    def params(self) -> List[Any]:
        raise NotImplementedError(f"{type(self).__name__} must define params()")

    @property
    def path(self) -> str:
        wallet_name = getattr(self, "wallet_name", None) if self.wallet_scoped else None
        return f"/wallet/{wallet_name}" if wallet_name else "/"

    def encode(self) -> RPCRequest:
        params = self.params()
        if self.trim_params:
            params = trim_trailing_none(params)
        return RPCRequest(method=self.method, params=params, path=self.path)


@lru_cache(maxsize=None)
def _list_adapter(item: Type["ResultSchema"]) -> TypeAdapter:
    return TypeAdapter(List[item])


class ResultSchema(Schema):
    normalize_keys: ClassVar[bool] = True

    scalar_field: ClassVar[Optional[str]] = None
    """Field that receives a bare string payload, for results that may arrive unwrapped."""

    list_field: ClassVar[Optional[str]] = None
    """Field that receives a bare array payload."""

    @classmethod
    def parse(cls: Type[R], raw: Any) -> Union[R, FieldValidationError]:
        """Cast a raw ``result``; return the instance or the aggregated error.

        A payload of an unexpected JSON type raises :class:`ShapeMismatchError`.
        """
        try:
            return cls.parse_or_raise(raw)
        except FieldValidationError as exc:
            return exc

    @classmethod
    def parse_or_raise(cls: Type[R], raw: Any) -> R:
        if isinstance(raw, dict):
            attrs = raw
        elif isinstance(raw, list) and cls.list_field:
            attrs = {cls.list_field: raw}
        elif isinstance(raw, str) and cls.scalar_field:
            attrs = {cls.scalar_field: raw}
        else:
            raise ShapeMismatchError(cls.__name__, raw)
        return cls.build_or_raise(attrs)

    @classmethod
    def parse_list(cls: Type[R], raw: Any) -> Union[List[R], FieldValidationError]:
        try:
            return cls.parse_list_or_raise(raw)
        except FieldValidationError as exc:
            return exc

    @classmethod
    def parse_list_or_raise(cls: Type[R], raw: Any) -> List[R]:
        """Cast an array of items; errors carry the failing index first in ``loc``."""
        if not isinstance(raw, list):
            raise ShapeMismatchError(f"List[{cls.__name__}]", raw)
        try:
            return _list_adapter(cls).validate_python(raw)
        except ValidationError as exc:
            raise FieldValidationError.from_validation_error(f"List[{cls.__name__}]", exc) from None
