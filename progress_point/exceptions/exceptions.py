"""Custom exceptions - SoC principle"""

class ProgressPointError(Exception):
    """Base exception for Progress Point"""
    pass

class ValidationError(ProgressPointError):
    """Input validation error"""
    pass

class NotFoundError(ProgressPointError):
    """Batch, student or restriction not found"""
    pass

class TimeRestrictedError(ProgressPointError):
    """Write attempted outside the configured time window"""
    pass
