class VenueNormalizerError(Exception):
    """Base exception for the venue normalizer."""


class ConfigurationError(VenueNormalizerError):
    """Raised when configuration or lookup tables are missing or invalid."""


class ManifestError(VenueNormalizerError):
    """Raised when a manifest or input CSV does not have the expected columns."""


class IndexSealedError(VenueNormalizerError):
    """Raised when a sealed venue index is mutated."""
