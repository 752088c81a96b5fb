"""Token estimation module."""

from chat_session.tokens.estimator import TiktokenEstimator, TokenEstimator

__all__ = [
    "TiktokenEstimator",
    "TokenEstimator",
]
