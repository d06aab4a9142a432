"""Parsed filter arguments value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FilterArguments:
    """Positional filter arguments after validation.

    Attributes:
        attr: Attribute path resolved on every element
        exp_test: Expression test name. None = interpreter default
        exp_args: Extra arguments passed verbatim to the test, in order
    """

    attr: str
    exp_test: str | None = None
    exp_args: tuple[object, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.attr, str):
            raise TypeError(f"attr must be str, got {type(self.attr).__name__}")
        if self.exp_test is not None and not isinstance(self.exp_test, str):
            raise TypeError(f"exp_test must be str or None, got {type(self.exp_test).__name__}")
        if self.exp_test is None and self.exp_args:
            raise ValueError("exp_args require an explicit exp_test")
