"""
Domain exceptions for analytics app.

Exception Hierarchy:
    AnalyticsServiceError (base)
    └── InvalidPeriodError

Usage:
    from apps.analytics.exceptions import InvalidPeriodError

    if period not in PERIODS:
        raise InvalidPeriodError(f"Invalid period: {period}")
"""


class AnalyticsServiceError(Exception):
    """
    Base exception for all analytics service errors.

        try:
            data = AnalyticsQueries.period_breakdown('decade')
        except AnalyticsServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidPeriodError(AnalyticsServiceError):
    """
    Raised when the period is not one of week, month or year.

    Example:
        raise InvalidPeriodError("Invalid period 'decade'")
    """

    pass
