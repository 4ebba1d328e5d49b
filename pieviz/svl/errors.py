# pieviz/svl/errors.py
# Everything is a ValueError so routes can treat schema and domain failures alike.

class ChartConfigError(ValueError):
    """Bad chart construction input: missing/unknown column mapping, bad option."""

class ChartDataError(ValueError):
    """Data that cannot be turned into a pie at render time."""

class NegativeValueError(ChartDataError):
    pass

class DegenerateTotalError(ChartDataError):
    pass
