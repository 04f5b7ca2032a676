class DashboardError(Exception):
    """Base class for errors raised while preparing the dashboard data."""


class LoadError(DashboardError):
    """The dataset is missing, unreadable or does not have the record shape."""


class CoercionError(LoadError):
    """A coordinate could not be parsed as a finite number."""

    def __init__(self, message, row=None, ip=None):
        super().__init__(message)
        self.row = row
        self.ip = ip
