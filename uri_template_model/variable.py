"""Variable name validation for URI templates."""

from __future__ import annotations

from collections.abc import Iterable

from .charset import Charset, is_unreserved


class VariableInvalidError(ValueError):
    """Exception thrown for invalid variables."""

    variable: str

    def __init__(self, variable: str) -> None:
        super().__init__(variable)
        self.variable = variable

    def __str__(self) -> str:
        """Convert to string."""
        return 'Bad variable: ' + repr(self.variable)


class ExpansionInvalidError(ValueError):
    """Exception thrown for expansions without variables."""

    expansion: str

    def __init__(self, expansion: str) -> None:
        super().__init__(expansion)
        self.expansion = expansion

    def __str__(self) -> str:
        """Convert to string."""
        return 'Bad expansion: ' + self.expansion + ' requires at least one variable'


def validate_variable(name: str, charset: type[Charset] = Charset) -> str:
    """
    Check a single variable name.

    Names must be non-empty and made of unreserved characters only.
    https://tools.ietf.org/html/rfc6570#section-2.3
    """
    if ((not isinstance(name, str)) or (not name) or (not is_unreserved(name, charset))):
        raise VariableInvalidError(name)
    return name


def validate_variables(expansion: str, names: Iterable[str], charset: type[Charset] = Charset) -> tuple[str, ...]:
    """Check the variable names of an expansion, return them as a tuple."""
    names = tuple(names)
    if (not names):
        raise ExpansionInvalidError(expansion)
    for name in names:
        validate_variable(name, charset)
    return names
