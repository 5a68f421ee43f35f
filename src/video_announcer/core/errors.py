"""Error types raised across the announcer."""


class ConfigurationError(RuntimeError):
    """Raised when required settings or secrets are missing."""


class DestinationNotFoundError(RuntimeError):
    """Raised when a destination feed cannot be resolved."""


class DeliveryError(RuntimeError):
    """Raised when a single announcement could not be sent."""
