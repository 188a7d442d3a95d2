"""Base interfaces for the adaboost package.

Example:
    >>> from adaboost.models.base import WeakClassifier, WeakClassifierGenerator
"""

from .protocols import WeakClassifier, WeakClassifierGenerator

__all__ = [
    'WeakClassifier',
    'WeakClassifierGenerator'
]
