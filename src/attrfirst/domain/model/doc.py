"""Filter documentation value objects.

Surface contract published for documentation generators.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FilterParam:
    """One documented filter parameter.

    Attributes:
        name: Parameter name (must not be empty)
        type: Human-readable type
        description: What the parameter does
        default: Default value as shown to users. None = required
    """

    name: str
    type: str = "string"
    description: str = ""
    default: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")

    @property
    def required(self) -> bool:
        """Check if parameter has no default."""
        return self.default is None


@dataclass(frozen=True, slots=True)
class FilterSnippet:
    """Usage example.

    Attributes:
        code: Template code (must not be empty)
        description: What the example does
    """

    code: str
    description: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.code:
            raise ValueError("code must not be empty")


@dataclass(frozen=True, slots=True)
class FilterDoc:
    """Documentation of one filter.

    Attributes:
        name: Filter name as used in templates
        description: Summary
        params: Documented parameters in positional order
        snippets: Usage examples
    """

    name: str
    description: str
    params: tuple[FilterParam, ...] = ()
    snippets: tuple[FilterSnippet, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        names = [p.name for p in self.params]
        if len(names) != len(set(names)):
            raise ValueError(f"duplicate param names in {self.name}: {names}")
        seen_optional = False
        for param in self.params:
            if param.required and seen_optional:
                raise ValueError(f"required param {param.name!r} follows an optional one")
            seen_optional = seen_optional or not param.required
