class SummfeatError(Exception):
    """Base class for feature extraction errors."""


class ParseFailure(SummfeatError):
    """The parser could not split the input into sentences and tokens."""


class InvalidConfiguration(SummfeatError, ValueError):
    """A configuration value (e.g. rank cutoff) is unusable."""


class InternalConsistencyFault(SummfeatError, RuntimeError):
    """Preprocessor output violates its own invariants."""
