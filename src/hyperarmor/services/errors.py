"""Service-layer exceptions."""


class WeaponNotFoundError(LookupError):
    """Raised when a service is asked about a weapon the dataset does not contain."""
