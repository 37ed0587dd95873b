# darkweave

darkweave is a small pure-Python toolkit of building blocks for grid-based
object detectors and character-level recurrent networks. It has no runtime
dependencies and works on plain Python lists.

It contains:

- **`darkweave.layers`**: a temperature-scaled, numerically stable
  `softmax_array`, a `SoftmaxLayer` that applies it to each group of every
  batch item, and a `RouteLayer` that concatenates the outputs of earlier
  layers and scatters deltas back to them.
- **`darkweave.rnn_data`**: reading integer token files and token lists, and
  cutting text or token streams into one-hot input/target batches (`RnnBatch`).
- **`darkweave.detections`**: decoding a grid detector's flat prediction
  vector into `Box` objects and thresholded class probabilities, and
  formatting them as per-class result lines.
- **`darkweave.posters`**: scoring a detector's output against the class
  encoded in an image's file name (`update_correct`, `ClassificationResult`).
- **`darkweave.utils`**: array statistics, weighted sampling, shuffling,
  string and path helpers.

## Installation

darkweave needs Python 3.10 or newer. Install it from a checkout of this
repository with your usual package installer; the `test` extra adds pytest.

## Layers

```python
from darkweave.layers import softmax_array, SoftmaxLayer, RouteLayer

probabilities = softmax_array([1.0, 2.0, 3.0], 1.0)

softmax = SoftmaxLayer(batch=1, inputs=4, groups=2, temperature=1.0)
out = softmax.forward([0.0, 1.0, 2.0, 3.0])   # each pair sums to 1

route = RouteLayer(batch=1, input_layers=[0, 2], input_sizes=[2, 3])
joined = route.forward({0: [1.0, 2.0], 2: [3.0, 4.0, 5.0]})
# [1.0, 2.0, 3.0, 4.0, 5.0]
```

`SoftmaxLayer.backward(delta)` returns the upstream delta with the layer's own
`delta` added; `RouteLayer.backward(layer_deltas)` returns a dict mapping each
input layer index to its delta with the route layer's `delta` added back in.
Both take either a dict or a list indexed by layer number.

## Character-RNN batches

```python
from darkweave.rnn_data import get_rnn_data

batch = get_rnn_data(b"hello world", offsets=[0, 5], characters=256, batch=2, steps=3)
batch.x        # one-hot inputs, step-major: (step * batch + stream) * characters
batch.y        # one-hot targets: the next byte of each stream
batch.offsets  # offsets advanced by `steps`, wrapping around the text
```

`get_rnn_token_data` does the same for a list of integer tokens, which must lie
in `[0, characters)`; `get_rnn_data` rejects zero bytes and bytes not below
`characters`. Both raise `ValueError` on a bad symbol. `read_tokenized_data`
reads whitespace-separated integers from a file and `read_tokens` reads its
lines.

## Detections

```python
from darkweave.detections import convert_detections, format_yolo_detections

boxes, probs = convert_detections(
    predictions, classes=20, num=2, square=True, side=7,
    w=1, h=1, thresh=0.2, only_objectness=False,
)
lines = format_yolo_detections("image_0001", boxes, probs, classes=20, w=1, h=1)
# lines[j] holds "id prob xmin ymin xmax ymax" strings for class j
```

The prediction vector holds the class probabilities of every cell, then the
confidence of every box, then four coordinates per box. Probabilities not above
`thresh` become zero; with `square=True` the width and height are squared.

## Poster scoring

```python
from darkweave.posters import update_correct, get_folder

result = update_correct(probs, thresh=0.0, classes=5, path="posters/3_0001.jpg")
result.correct   # True when the strongest guess is class 3
result.scores    # (best class, best %, second class, second %)

get_folder("runs/test/model.cfg")   # "runs/test/"
```

The true class is the number before the first `_` of a file named like
`CLASS_ID.jpg`. Progress is reported through the `darkweave.posters` logger at
INFO level.

## Helpers

`darkweave.utils` offers `mean_array`, `variance_array`, `normalize_array`,
`mag_array`, `dist_array`, `top_k`, `max_index`, `sample_array`, `shuffle`,
`sorta_shuffle`, `parse_csv_line`, `parse_fields`, `basecfg`, `find_replace`,
`get_file_name`, `get_image_name`, `get_second_last` and others. Functions
that draw random numbers take an optional `rng` (for example a
`random.Random`) and fall back to the `random` module.

## What darkweave does not do

darkweave does not read network description files or weight files, does not
build or train whole networks, and does not load or draw images. It has no
command-line program; it is a library to be called from your own code.

## Running the tests

Install the `test` extra and run pytest from the repository root.