class SchemerError(Exception):
    """ Base class for all Schemer errors"""
    pass

class SchemerSyntaxError(SchemerError):
    """ Raised when there is a syntax error"""

class SchemerParseError(SchemerSyntaxError):
    """ Raised when the reader cannot match an expression at the start of the input.

    Carries the furthest position the reader reached together with what it
    expected there, laid out the way Parsec reports errors.
    """

    def __init__(
        self,
        source_name: str,
        position: int,
        line: int,
        column: int,
        unexpected: str,
        expected: tuple[str, ...] = (),
        message: str | None = None,
    ):
        self.source_name = source_name
        self.position = position
        self.line = line
        self.column = column
        self.unexpected = unexpected
        self.expected = expected
        self.message = message
        super().__init__(self.describe())

    def describe(self) -> str:
        lines = [f'"{self.source_name}" (line {self.line}, column {self.column}):']
        lines.append(f"unexpected {self.unexpected}")
        if self.message:
            lines.append(self.message)
        elif self.expected:
            lines.append(f"expecting {_or_list(self.expected)}")
        return "\n".join(lines)

class SchemerTypeError(SchemerError):
    """ Raised when the types of arguments passed to a primitive are incorrect"""

class SchemerArityError(SchemerError):
    """ Raised when the number of arguments passed to a primitive is incorrect"""

class SchemerUnboundSymbol(SchemerError):
    """ Raised in strict mode when an operator is not in the primitive table"""

class SchemerDivisionByZero(SchemerError):
    """ Raised when a division primitive is given a zero divisor"""


def _or_list(items: tuple[str, ...]) -> str:
    if len(items) == 1:
        return items[0]
    return ", ".join(items[:-1]) + " or " + items[-1]
