"""Numeric, string and random helpers shared across the package."""

from __future__ import annotations

import math
import random
import re
from collections.abc import MutableSequence, Sequence
from typing import Any

TWO_PI = 6.2831853071795864769252866

_ATOI = re.compile(r"\s*([+-]?\d+)")


def _source(rng: Any) -> Any:
    """Return the given random source, or the module-level one."""
    return random if rng is None else rng


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way: 0 when there is none."""
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _tokens(text: str, delims: str) -> list[str]:
    """Split on any of the delimiter characters, dropping empty pieces."""
    if not delims:
        return [text] if text else []
    return [tok for tok in re.split(f"[{re.escape(delims)}]", text) if tok]


def _shuffle_range(items: MutableSequence, start: int, end: int, rng: Any) -> None:
    for i in range(start, end - 1):
        j = rng.randrange(i, end)
        items[i], items[j] = items[j], items[i]


def shuffle(items: MutableSequence, rng: Any = None) -> None:
    """Shuffle a mutable sequence in place."""
    _shuffle_range(items, 0, len(items), _source(rng))


def sorta_shuffle(items: MutableSequence, sections: int, rng: Any = None) -> None:
    """Shuffle each of `sections` contiguous slices of `items` in place."""
    source = _source(rng)
    n = len(items)
    for i in range(sections):
        _shuffle_range(items, n * i // sections, n * (i + 1) // sections, source)


def basecfg(cfgfile: str) -> str:
    """Return the file name without directories and without any extension."""
    name = cfgfile.rsplit("/", 1)[-1]
    return name.split(".", 1)[0]


def alphanum_to_int(c: str) -> int:
    """Map '0'-'9' to 0-9 and 'a'-'z' to 10-35."""
    code = ord(c)
    return code - 48 if code < 58 else code - 87


def int_to_alphanum(i: int) -> str:
    """Inverse of alphanum_to_int; 36 maps to '.'."""
    if i == 36:
        return "."
    return chr(i + 48) if i < 10 else chr(i + 87)


def find_replace(text: str, orig: str, rep: str) -> str:
    """Replace the first occurrence of `orig` in `text` with `rep`."""
    return text.replace(orig, rep, 1)


def top_k(values: Sequence[float], k: int) -> list[int]:
    """Indexes of the k largest values, earliest first on ties, padded with -1."""
    order = sorted(range(len(values)), key=values.__getitem__, reverse=True)[:k]
    return order + [-1] * (k - len(order))


def strip(text: str) -> str:
    """Remove every space, tab and newline from the text."""
    return text.translate({ord(" "): None, ord("\t"): None, ord("\n"): None})


def strip_char(text: str, bad: str) -> str:
    """Remove every occurrence of one character."""
    return text.replace(bad, "")


def split_str(text: str, delim: str) -> list[str]:
    """Split on a single delimiter, keeping empty fields."""
    return text.split(delim)


def parse_csv_line(line: str) -> list[str]:
    """Split a CSV line on commas that are not inside double quotes."""
    fields: list[str] = []
    current: list[str] = []
    inside = False
    for ch in line:
        if ch == '"':
            inside = not inside
            current.append(ch)
        elif ch == "," and not inside:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
    fields.append("".join(current))
    return fields


def count_fields(line: str) -> int:
    """Number of comma-separated fields in a line."""
    return line.count(",") + 1


def _parse_field(field: str) -> float:
    if not field:
        return math.nan
    body = field[:-1] if field.endswith("\r") else field
    if not body:
        return 0.0
    if body != body.rstrip() or "_" in body:
        return math.nan
    try:
        return float(body)
    except ValueError:
        return math.nan


def parse_fields(line: str, n: int) -> list[float]:
    """Parse up to n numeric fields; bad or empty fields become NaN, missing ones 0."""
    fields = [_parse_field(field) for field in line.split(",")][:n]
    return fields + [0.0] * (n - len(fields))


def sum_array(values: Sequence[float]) -> float:
    """Sum of the values."""
    return sum(values)


def mean_array(values: Sequence[float]) -> float:
    """Arithmetic mean of the values."""
    return sum(values) / len(values)


def mean_arrays(arrays: Sequence[Sequence[float]]) -> list[float]:
    """Element-wise mean of equally long arrays."""
    count = len(arrays)
    return [sum(column) / count for column in zip(*arrays)]


def variance_array(values: Sequence[float]) -> float:
    """Population variance of the values."""
    mean = mean_array(values)
    return sum((v - mean) ** 2 for v in values) / len(values)


def constrain_int(a: int, lo: int, hi: int) -> int:
    """Clamp an integer into [lo, hi]."""
    if a < lo:
        return lo
    if a > hi:
        return hi
    return a


def constrain(lo: float, hi: float, a: float) -> float:
    """Clamp a float into [lo, hi]."""
    if a < lo:
        return lo
    if a > hi:
        return hi
    return a


def dist_array(a: Sequence[float], b: Sequence[float], sub: int) -> float:
    """Euclidean distance over every `sub`-th element."""
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a[::sub], b[::sub])))


def mse_array(values: Sequence[float]) -> float:
    """Root of the mean of squares."""
    return math.sqrt(sum(v * v for v in values) / len(values))


def normalize_array(values: Sequence[float]) -> list[float]:
    """Shift and scale to zero mean and unit variance."""
    mu = mean_array(values)
    sigma = math.sqrt(variance_array(values))
    return [(v - mu) / sigma for v in values]


def translate_array(values: Sequence[float], s: float) -> list[float]:
    """Add s to every value."""
    return [v + s for v in values]


def mag_array(values: Sequence[float]) -> float:
    """Euclidean norm of the values."""
    return math.sqrt(sum(v * v for v in values))


def scale_array(values: Sequence[float], s: float) -> list[float]:
    """Multiply every value by s."""
    return [v * s for v in values]


def sample_array(values: Sequence[float], rng: Any = None) -> int:
    """Draw an index with probability proportional to its weight."""
    total = sum(values)
    r = _source(rng).random()
    for i, weight in enumerate(values):
        r -= weight / total
        if r <= 0:
            return i
    return len(values) - 1


def max_index(values: Sequence[float]) -> int:
    """Index of the first largest value, or -1 when empty."""
    if not values:
        return -1
    return max(range(len(values)), key=values.__getitem__)


def rand_int(lo: int, hi: int, rng: Any = None) -> int:
    """Uniform integer in [lo, hi]."""
    return _source(rng).randint(lo, hi)


def rand_normal(rng: Any = None) -> float:
    """Standard normal sample by the Box-Muller transform."""
    source = _source(rng)
    u = max(source.random(), 1e-100)
    radius = math.sqrt(-2 * math.log(u))
    theta = source.random() * TWO_PI
    return radius * math.cos(theta)


def rand_size_t(rng: Any = None) -> int:
    """Uniform unsigned 64-bit integer."""
    return _source(rng).getrandbits(64)


def rand_uniform(lo: float, hi: float, rng: Any = None) -> float:
    """Uniform float between lo and hi."""
    return _source(rng).random() * (hi - lo) + lo


def one_hot_encode(values: Sequence[float], k: int) -> list[list[float]]:
    """One row of k zeros per value, with a 1 at int(value)."""
    rows = []
    for value in values:
        row = [0.0] * k
        row[int(value)] = 1.0
        rows.append(row)
    return rows


def _before_jpg(path: str, delims: str) -> list[str]:
    tokens = _tokens(path, delims)
    try:
        end = tokens.index("jpg")
    except ValueError:
        raise ValueError(f"path has no 'jpg' component: {path!r}") from None
    return tokens[:end]


def get_poster_class(path: str) -> int:
    """Class index from a path shaped like dir/CLASS_ID.jpg."""
    tokens = ["-1", "-1"] + _before_jpg(path, "/._")
    return _atoi(tokens[-2])


def get_file_name(path: str) -> str:
    """Last non-empty '/'-separated component, or '-1'."""
    tokens = _tokens(path, "/")
    return tokens[-1] if tokens else "-1"


def get_image_name(path: str) -> str:
    """Image name without directories and the .jpg extension."""
    return (["-1"] + _before_jpg(path, "/."))[-1]


def get_second_last(path: str, delims: str) -> str:
    """Second-to-last token when splitting on any of `delims`, or '-1'."""
    return (["-1", "-1"] + _tokens(path, delims))[-2]