"""Softmax and route layers working on flat, batch-major float lists."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

LayerData = Mapping[int, Sequence[float]] | Sequence[Sequence[float]]


def softmax_array(values: Sequence[float], temp: float) -> list[float]:
    """Softmax of the values at the given temperature, computed stably."""
    if not values:
        return []
    largest = max(values)
    total = sum(math.exp(v / temp - largest / temp) for v in values)
    shift = largest / temp + math.log(total) if total else largest - 100
    return [math.exp(v / temp - shift) for v in values]


@dataclass
class SoftmaxLayer:
    """Softmax over each of `groups` equal slices of every batch item."""

    batch: int
    inputs: int
    groups: int = 1
    temperature: float = 1.0
    output: list[float] = field(init=False)
    delta: list[float] = field(init=False)

    def __post_init__(self) -> None:
        if self.groups <= 0 or self.inputs % self.groups != 0:
            raise ValueError("inputs must be divisible by groups")
        self.output = [0.0] * (self.inputs * self.batch)
        self.delta = [0.0] * (self.inputs * self.batch)

    @property
    def outputs(self) -> int:
        return self.inputs

    def forward(self, inputs: Sequence[float]) -> list[float]:
        """Apply the softmax to every group of every batch item."""
        total = self.inputs * self.batch
        if len(inputs) < total:
            raise ValueError(f"expected {total} inputs, got {len(inputs)}")
        width = self.inputs // self.groups
        output: list[float] = []
        for start in range(0, total, width):
            output.extend(softmax_array(inputs[start : start + width], self.temperature))
        self.output = output
        return output

    def backward(self, delta: Sequence[float]) -> list[float]:
        """Return the upstream delta with this layer's delta added in."""
        total = self.inputs * self.batch
        if len(delta) < total:
            raise ValueError(f"expected {total} delta values, got {len(delta)}")
        summed = [d + own for d, own in zip(delta, self.delta)]
        return summed + list(delta[total:])


@dataclass
class RouteLayer:
    """Concatenates the outputs of earlier layers, batch item by batch item."""

    batch: int
    input_layers: list[int]
    input_sizes: list[int]
    output: list[float] = field(init=False)
    delta: list[float] = field(init=False)

    def __post_init__(self) -> None:
        if len(self.input_layers) != len(self.input_sizes):
            raise ValueError("input_layers and input_sizes must have the same length")
        self.output = [0.0] * (self.outputs * self.batch)
        self.delta = [0.0] * (self.outputs * self.batch)

    @property
    def outputs(self) -> int:
        return sum(self.input_sizes)

    @property
    def inputs(self) -> int:
        return self.outputs

    def forward(self, layer_outputs: LayerData) -> list[float]:
        """Gather the listed layers' outputs into one row per batch item."""
        outputs = self.outputs
        result = [0.0] * (outputs * self.batch)
        offset = 0
        for index, size in zip(self.input_layers, self.input_sizes):
            source = layer_outputs[index]
            for j in range(self.batch):
                start = offset + j * outputs
                result[start : start + size] = source[j * size : (j + 1) * size]
            offset += size
        self.output = result
        return result

    def backward(self, layer_deltas: LayerData) -> dict[int, list[float]]:
        """Return the listed layers' deltas with this layer's delta scattered back in."""
        outputs = self.outputs
        result: dict[int, list[float]] = {}
        offset = 0
        for index, size in zip(self.input_layers, self.input_sizes):
            target = result.setdefault(index, list(layer_deltas[index]))
            for j in range(self.batch):
                start = offset + j * outputs
                for k, value in enumerate(self.delta[start : start + size]):
                    target[j * size + k] += value
            offset += size
        return result