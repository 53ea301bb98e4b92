class GrowthError(Exception):
    pass


class ConfigurationError(GrowthError, ValueError):
    """The requested run can't be made, e.g. more seeds than there are colors."""


class PreconditionViolation(GrowthError, RuntimeError):
    """The growth pass reached a state that correct settings never produce."""


class ResourceExhaustion(GrowthError, MemoryError):
    pass
