"""Custom exception hierarchy for the grounding engine."""


class GroundingEngineError(Exception):
    """Base exception for all grounding engine errors."""


class InvalidInputError(GroundingEngineError):
    """Generated text or corpus is missing or of the wrong type."""


class ConfigurationError(GroundingEngineError):
    """Error in system configuration."""


class ValidationTimeoutError(GroundingEngineError):
    """A caller-imposed validation deadline expired."""
