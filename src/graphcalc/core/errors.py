"""
Error types for graphcalc formula compilation and configuration.
"""


class GraphCalcError(Exception):
    """Base exception for all graphcalc errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FormulaError(GraphCalcError):
    """
    Raised when a formula cannot be compiled.

    ``pos`` is an approximate locator for display and debugging. Tokenizer
    errors report a character index into the formula; parser errors report
    the token-stream index after the most recent token consumption.
    """

    kind = "FormulaError"

    def __init__(self, message: str, pos: int = 0):
        super().__init__(message)
        self.pos = pos

    def describe(self) -> str:
        """Format as ``<Kind> at <pos>: <message>``."""
        return f"{self.kind} at {self.pos}: {self.message}"


class TokenizationError(FormulaError):
    """
    Raised when the tokenizer meets a malformed numeric literal.

    Examples:
    - Second decimal point in one number ("1.2.3")
    - A lone decimal point with no digits (".")
    """

    kind = "TokenizationError"


class FormulaSyntaxError(FormulaError):
    """
    Raised when a token sequence is not a valid formula.

    Examples:
    - Unknown constant or function name
    - Wrong number of function arguments
    - Missing closing parenthesis
    - Tokens left over after a complete expression
    """

    kind = "SyntaxError"


class FormulaLengthError(FormulaError):
    """Raised when a formula is longer than the configured cap."""

    kind = "LengthError"


class ConfigError(GraphCalcError):
    """Raised when graphcalc.toml cannot be read or holds invalid values."""
