"""How a contract function interacts with blockchain state."""

from __future__ import annotations

from enum import Enum


class StateMutability(Enum):
    """Whether a function reads or modifies blockchain state."""

    PURE = "pure"
    VIEW = "view"
    NON_PAYABLE = "nonpayable"
    PAYABLE = "payable"

    @classmethod
    def parse(cls, value: str) -> StateMutability:
        """Parse the ABI JSON spelling of a state mutability."""
        if not isinstance(value, str):
            raise TypeError(
                "expected the string 'pure', 'view', 'payable', or 'nonpayable'"
            )
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"unknown variant `{value}`, expected one of "
                "`pure`, `view`, `payable`, `nonpayable`"
            ) from None

    @classmethod
    def default(cls) -> StateMutability:
        """The mutability assumed when none is given."""
        return cls.NON_PAYABLE