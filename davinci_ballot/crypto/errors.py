"""Exception hierarchy for ballot encoding."""


class BallotEncodingError(Exception):
    """Base exception for ballot encoding operations"""
    pass


class SizingError(BallotEncodingError, ValueError):
    """Vector length does not fit the circuit or hash arity"""
    pass


class DomainError(BallotEncodingError, ValueError):
    """Value is not a field element, or point is not on the curve"""
    pass


class DegenerateInputError(BallotEncodingError):
    """Zero seed, zero public key or identity public key"""
    pass


class ConfigurationError(BallotEncodingError):
    """Ballot or engine configuration is malformed"""
    pass
