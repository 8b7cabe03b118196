"""Contract function specifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from abicodec.param_type import ParamType
from abicodec.params import Param, ParamSpecError
from abicodec.signature import short_signature
from abicodec.state_mutability import StateMutability


def _read_params(data: Mapping[str, Any], key: str) -> list[Param]:
    if key not in data:
        raise ParamSpecError(f"missing field `{key}`")
    raw = data[key]
    if not isinstance(raw, list):
        raise ParamSpecError(f"field `{key}` must be a list, got {raw!r}")
    return [Param.from_dict(item) for item in raw]


@dataclass
class Function:
    """A contract function: its name, inputs, outputs and state mutability.

    ``constant`` is kept for older ABI files; newer ones use ``state_mutability``.
    """

    name: str
    inputs: list[Param] = field(default_factory=list)
    outputs: list[Param] = field(default_factory=list)
    constant: bool = False
    state_mutability: StateMutability = StateMutability.NON_PAYABLE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Function:
        """Build from an ABI JSON function entry."""
        if not isinstance(data, Mapping):
            raise ParamSpecError(f"expected a function spec object, got {data!r}")
        if "name" not in data:
            raise ParamSpecError("missing field `name`")
        name = data["name"]
        if not isinstance(name, str):
            raise ParamSpecError(f"field `name` must be a string, got {name!r}")
        inputs = _read_params(data, "inputs")
        outputs = _read_params(data, "outputs")
        constant = data.get("constant", False)
        if not isinstance(constant, bool):
            raise ParamSpecError(f"field `constant` must be a bool, got {constant!r}")
        if "stateMutability" in data:
            mutability = StateMutability.parse(data["stateMutability"])
        else:
            mutability = StateMutability.default()
        return cls(
            name=name,
            inputs=inputs,
            outputs=outputs,
            constant=constant,
            state_mutability=mutability,
        )

    def input_param_types(self) -> list[ParamType]:
        """Types of the input parameters, in order."""
        return [param.kind for param in self.inputs]

    def output_param_types(self) -> list[ParamType]:
        """Types of the output parameters, in order."""
        return [param.kind for param in self.outputs]

    def selector(self) -> bytes:
        """The 4-byte selector that prefixes an encoded call of this function."""
        return short_signature(self.name, self.input_param_types())

    def signature(self) -> str:
        """A signature that uniquely identifies this function.

        For example ``functionName()`` or ``functionName(bool):(uint256,string)``.
        """
        inputs = ",".join(str(param.kind) for param in self.inputs)
        outputs = ",".join(str(param.kind) for param in self.outputs)
        if not outputs:
            return f"{self.name}({inputs})"
        return f"{self.name}({inputs}):({outputs})"