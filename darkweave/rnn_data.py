"""Loading text and token streams and cutting them into one-hot RNN batches."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class RnnBatch:
    """One-hot inputs and targets, step-major, and the advanced stream offsets."""

    x: list[float]
    y: list[float]
    offsets: list[int]


def read_tokenized_data(path: str | Path) -> list[int]:
    """Read whitespace-separated integers up to the first thing that is not one."""
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    tokens: list[int] = []
    pos = 0
    while (match := _INT.match(text, pos)) is not None:
        tokens.append(int(match.group(1)))
        pos = match.end()
    return tokens


def read_tokens(path: str | Path) -> list[str]:
    """Read the file's lines without their trailing newlines."""
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _one_hot_batch(
    stream: Sequence[int],
    offsets: Sequence[int],
    characters: int,
    batch: int,
    steps: int,
    valid,
) -> RnnBatch:
    length = len(stream)
    if length == 0:
        raise ValueError("cannot draw batches from an empty stream")
    if len(offsets) < batch:
        raise ValueError("need one offset per batch stream")
    x = [0.0] * (batch * steps * characters)
    y = [0.0] * (batch * steps * characters)
    new_offsets = list(offsets)
    for i in range(batch):
        for j in range(steps):
            curr = stream[new_offsets[i] % length]
            nxt = stream[(new_offsets[i] + 1) % length]
            if not (valid(curr) and valid(nxt)):
                raise ValueError("Bad char")
            row = (j * batch + i) * characters
            x[row + curr] = 1.0
            y[row + nxt] = 1.0
            new_offsets[i] = (new_offsets[i] + 1) % length
    return RnnBatch(x, y, new_offsets)


def get_rnn_token_data(
    tokens: Sequence[int], offsets: Sequence[int], characters: int, batch: int, steps: int
) -> RnnBatch:
    """One-hot batch from a token stream; each token must be in [0, characters)."""
    return _one_hot_batch(
        tokens, offsets, characters, batch, steps, lambda t: 0 <= t < characters
    )


def get_rnn_data(
    text: bytes, offsets: Sequence[int], characters: int, batch: int, steps: int
) -> RnnBatch:
    """One-hot batch from raw bytes; zero bytes and bytes past `characters` are rejected."""
    return _one_hot_batch(
        bytes(text), offsets, characters, batch, steps, lambda b: 0 < b < characters
    )