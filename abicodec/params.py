"""Function and tuple parameter specifications as found in ABI JSON."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from abicodec.param_type import InvalidNameError, ParamKind, ParamType, read_param_type


class ParamSpecError(ValueError):
    """Raised when an ABI JSON parameter specification is malformed."""


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ParamSpecError(f"expected {what} as a JSON object, got {data!r}")
    return data


def _read_name(data: Mapping[str, Any]) -> str | None:
    name = data.get("name")
    if name is not None and not isinstance(name, str):
        raise ParamSpecError(f"field `name` must be a string, got {name!r}")
    return name


def _read_kind(data: Mapping[str, Any]) -> ParamType:
    if "type" not in data:
        raise ParamSpecError("missing field `kind`")
    type_name = data["type"]
    if not isinstance(type_name, str):
        raise ParamSpecError(f"field `type` must be a string, got {type_name!r}")
    try:
        return read_param_type(type_name)
    except InvalidNameError as error:
        raise ParamSpecError(str(error)) from error


def _read_components(data: Mapping[str, Any]) -> list[TupleParam] | None:
    if "components" not in data:
        return None
    raw = data["components"]
    if not isinstance(raw, list):
        raise ParamSpecError(f"field `components` must be a list, got {raw!r}")
    return [TupleParam.from_dict(item) for item in raw]


def with_tuple_components(
    kind: ParamType, components: Iterable[TupleParam] | None
) -> ParamType:
    """Fill the innermost tuple of ``kind`` (looking through arrays) with ``components``.

    Types without a tuple are returned unchanged; a tuple type requires components.
    """
    if kind.kind is ParamKind.ARRAY:
        return ParamType.array(with_tuple_components(kind.inner, components))
    if kind.kind is ParamKind.FIXED_ARRAY:
        return ParamType.fixed_array(with_tuple_components(kind.inner, components), kind.size)
    if kind.kind is ParamKind.TUPLE:
        if components is None:
            raise ParamSpecError("missing field `components`")
        return ParamType.tuple_(kind.components + tuple(c.kind for c in components))
    return kind


@dataclass(frozen=True)
class TupleParam:
    """One component of a tuple parameter; its name is optional."""

    name: str | None
    kind: ParamType

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TupleParam:
        """Build from a JSON object with ``type`` and optional ``name``/``components``."""
        data = _require_mapping(data, "a tuple parameter spec")
        name = _read_name(data)
        kind = _read_kind(data)
        kind = with_tuple_components(kind, _read_components(data))
        return cls(name=name, kind=kind)


@dataclass(frozen=True)
class Param:
    """A named function parameter."""

    name: str
    kind: ParamType

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Param:
        """Build from a JSON object with ``name``, ``type`` and optional ``components``."""
        data = _require_mapping(data, "a parameter spec")
        if "name" not in data:
            raise ParamSpecError("missing field `name`")
        name = _read_name(data)
        if name is None:
            raise ParamSpecError("field `name` must be a string, got None")
        kind = _read_kind(data)
        kind = with_tuple_components(kind, _read_components(data))
        return cls(name=name, kind=kind)