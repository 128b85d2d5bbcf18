# pcn/errors.py


class PerceptronError(Exception):
    """Base class for every error raised by the perceptron core."""


class AllocationFailure(PerceptronError, MemoryError):
    """A matrix could not be allocated (non-positive size or out of memory)."""


class DimensionMismatch(PerceptronError, ValueError):
    """Matrix shapes do not satisfy an operation's contract."""


class MalformedTarget(PerceptronError, ValueError):
    """A target value maps to a class index outside the confusion matrix."""
