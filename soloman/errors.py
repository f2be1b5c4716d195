class CompileError(RuntimeError):
    """Base class for every failure that aborts a compilation run."""


class InvalidCharacter(CompileError):
    pass


class MalformedKeyword(CompileError):
    pass


class LiteralOverflow(CompileError):
    pass


class UnexpectedToken(CompileError):
    pass


class ExternalToolFailure(CompileError):
    pass
