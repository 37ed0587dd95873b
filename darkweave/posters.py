"""Scoring poster classifications made from grid detector output."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from darkweave.utils import get_poster_class, max_index

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationResult:
    """The two strongest poster guesses for one image, and the class its path names."""

    best_class: int
    best_prob: float
    second_class: int
    second_prob: float
    truth_class: int

    @property
    def correct(self) -> bool:
        """Whether the strongest guess is the class the path names."""
        return self.best_class == self.truth_class

    @property
    def scores(self) -> tuple[int, int, int, int]:
        """Best class, best percentage, second class, second percentage, as whole numbers."""
        return (
            self.best_class,
            int(self.best_prob * 100),
            self.second_class,
            int(self.second_prob * 100),
        )


def update_correct(
    probs: Sequence[Sequence[float]], thresh: float, classes: int, path: str
) -> ClassificationResult:
    """Pick the two strongest box predictions above `thresh` and compare with the path's class.

    Each row of `probs` votes with its most likely class among the first
    `classes` entries. A row that beats the current best replaces it without
    moving the old best down to second place. The true class comes from a
    path shaped like dir/CLASS_ID.jpg.
    """
    best_prob = 0.0
    second_prob = 0.0
    best_class = -1
    second_class = -1
    for row in probs:
        candidates = list(row[:classes])
        cls = max_index(candidates)
        if cls < 0:
            continue
        prob = candidates[cls]
        if prob > thresh:
            if prob > best_prob:
                best_prob = prob
                best_class = cls
            elif prob > second_prob:
                second_prob = prob
                second_class = cls

    truth = get_poster_class(path)
    result = ClassificationResult(best_class, best_prob, second_class, second_prob, truth)
    log.info("image %s", path)
    log.info(
        "1st poster: %d - %.0f%%,    2nd poster: %d - %.0f%%",
        best_class,
        best_prob * 100,
        second_class,
        second_prob * 100,
    )
    if not result.correct:
        log.info("wrong classification for %s", path)
    return result


def get_folder(path: str) -> str:
    """Directory part of a path including its trailing '/'.

    A path without any '/' yields just its first character.
    """
    last = path.rfind("/")
    return path[: last + 1] if last >= 0 else path[:1]