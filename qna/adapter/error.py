"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class BroadcastError(AdapterError):
    """An event could not be encoded for delivery."""

    pass
