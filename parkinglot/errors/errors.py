"""Errors raised by lot operations.

Only hard errors live here. Soft conditions (lot full, nothing found) are
ordinary results and never raised.
"""


class ParkingLotError(Exception):
    """Base error of the parking lot."""
    pass


class InvalidArgument(ParkingLotError):
    """An argument could not be parsed or was missing."""
    pass


class NotInitialized(ParkingLotError):
    """The operation needs a lot and none has been created yet."""
    pass
