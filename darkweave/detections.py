"""Turning grid detector output into boxes and per-class detection lines."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class Box:
    """A box given by its centre and its size."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    @property
    def corners(self) -> tuple[float, float, float, float]:
        """Left, top, right and bottom edges."""
        return (
            self.x - self.w / 2.0,
            self.y - self.h / 2.0,
            self.x + self.w / 2.0,
            self.y + self.h / 2.0,
        )


def convert_detections(
    predictions: Sequence[float],
    classes: int,
    num: int,
    square: bool,
    side: int,
    w: float,
    h: float,
    thresh: float,
    only_objectness: bool,
) -> tuple[list[Box], list[list[float]]]:
    """Decode a side x side grid with `num` boxes per cell into boxes and class probabilities.

    The prediction vector holds, in order, the class probabilities of every cell,
    the confidence of every box, and four coordinates for every box. Probabilities
    not above `thresh` become zero.
    """
    cells = side * side
    needed = cells * (classes + num * 5)
    if len(predictions) < needed:
        raise ValueError(f"expected at least {needed} predictions, got {len(predictions)}")
    power = 2 if square else 1
    boxes: list[Box] = []
    probs: list[list[float]] = []
    for i in range(cells):
        row, col = divmod(i, side)
        class_start = i * classes
        class_probs = predictions[class_start : class_start + classes]
        for n in range(num):
            index = i * num + n
            scale = predictions[cells * classes + index]
            box_index = cells * (classes + num) + index * 4
            px, py, pw, ph = predictions[box_index : box_index + 4]
            boxes.append(
                Box(
                    x=(px + col) / side * w,
                    y=(py + row) / side * h,
                    w=pw**power * w,
                    h=ph**power * h,
                )
            )
            row_probs = []
            for p in class_probs:
                prob = scale * p
                row_probs.append(prob if prob > thresh else 0.0)
            if only_objectness and row_probs:
                row_probs[0] = scale
            probs.append(row_probs)
    return boxes, probs


def format_yolo_detections(
    image_id: str,
    boxes: Sequence[Box],
    probs: Sequence[Sequence[float]],
    classes: int,
    w: float,
    h: float,
) -> list[list[str]]:
    """Lines "id prob xmin ymin xmax ymax" for every non-zero probability, one list per class.

    Box edges are clipped to the image of size w x h.
    """
    if len(boxes) != len(probs):
        raise ValueError("boxes and probs must have the same length")
    lines: list[list[str]] = [[] for _ in range(classes)]
    for box, box_probs in zip(boxes, probs):
        xmin, ymin, xmax, ymax = box.corners
        xmin = max(xmin, 0.0)
        ymin = max(ymin, 0.0)
        xmax = min(xmax, w)
        ymax = min(ymax, h)
        for j in range(classes):
            prob = box_probs[j]
            if prob:
                lines[j].append(
                    f"{image_id} {prob:f} {xmin:f} {ymin:f} {xmax:f} {ymax:f}"
                )
    return lines