class GeneratorError(Exception):
    """Base error for the catalog data generator."""


class InvalidRangeError(GeneratorError, ValueError):
    """A (min, max) bound is malformed or has min greater than max."""


class InvalidBatchError(GeneratorError, ValueError):
    """A batch request asks for an unsupported amount or product type."""


class UnknownTaxonomyError(GeneratorError, LookupError):
    """Terms were requested for a taxonomy that does not exist."""
