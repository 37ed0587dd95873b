"""Layers, RNN batching, detection decoding, poster scoring and helpers for small neural networks."""

__version__ = "0.1.0"

__all__ = [
    "detections",
    "layers",
    "posters",
    "rnn_data",
    "utils",
]