"""
Image classifier interface for cat detection.

The classifier is an abstraction layer between the alarm controller and
whatever actually looks at camera frames (a cloud vision API, an on-device
model, etc.). The integration layer provides a concrete implementation.

Design Principle:
    The controller never inspects images. It hands the frame and a
    confidence threshold to the classifier and acts on the boolean it gets
    back. Images are opaque objects as far as this library is concerned.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional
import logging
import random

logger = logging.getLogger(__name__)


class ClassificationError(RuntimeError):
    """Raised when the classification backend is unreachable or returns bad data."""


class ImageClassifier(ABC):
    """Abstract interface for cat detection."""

    @abstractmethod
    def contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        """
        Decide whether an image shows a cat.

        Args:
            image: Camera frame in whatever form the backend accepts
            confidence_threshold: Minimum confidence (0-100) to report a cat

        Returns:
            True if a cat was found with at least the given confidence

        Raises:
            ClassificationError: If the backend fails
        """
        pass


class FakeImageClassifier(ImageClassifier):
    """
    Stand-in classifier that guesses.

    Useful for demos and for running the controller without a vision
    backend. Pass a seed for repeatable guesses.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._random = random.Random(seed)

    def contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        guess = self._random.random() < 0.5
        logger.debug(f"Fake classifier guessed cat={guess}")
        return guess


class MockImageClassifier(ImageClassifier):
    """
    Mock classifier for testing.

    Returns a configurable result and records every call.

    Example:
        classifier = MockImageClassifier(result=True)
        classifier.set_error(ClassificationError("service down"))
    """

    def __init__(self, result: bool = False) -> None:
        self._result = result
        self._error: Optional[Exception] = None
        self._calls: List[tuple[Any, float]] = []

    def set_result(self, result: bool) -> None:
        """Set the value returned by contains_cat()."""
        self._result = result

    def set_error(self, error: Optional[Exception]) -> None:
        """Make contains_cat() raise error (None to clear)."""
        self._error = error

    def get_calls(self) -> List[tuple[Any, float]]:
        """Get recorded (image, threshold) calls."""
        return self._calls.copy()

    def contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        self._calls.append((image, confidence_threshold))
        if self._error is not None:
            raise self._error
        return self._result
