"""
Imaging package for home-security.

Cat detection is delegated to an ImageClassifier. This package defines
the interface plus two implementations that need no vision backend:

- FakeImageClassifier: guesses, for demos
- MockImageClassifier: scripted results, for tests
"""

from .classifier import (
    ClassificationError,
    FakeImageClassifier,
    ImageClassifier,
    MockImageClassifier,
)

__all__ = [
    "ClassificationError",
    "FakeImageClassifier",
    "ImageClassifier",
    "MockImageClassifier",
]
