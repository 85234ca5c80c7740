# visionlab

Classic image-processing routines and the building blocks of a small, fully
connected neural network, all working on NumPy arrays.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Image processing

Images are `numpy` arrays of shape `(height, width, channels)` for colour
images (channels in BGR order) or `(height, width)` for grayscale images.
Values are handled as `float32`. Every function returns a new array and leaves
its input untouched. Invalid input, such as an empty image, a wrong number of
channels, an even kernel size or an out-of-bounds region, raises `ValueError`.

```python
import numpy as np
from visionlab.processing.color import bgr_to_hsv, hsv_to_bgr, to_grayscale
from visionlab.processing.blur import gaussian_blur, median_blur, unsharp_mask
from visionlab.processing.resizing import resize, pad
from visionlab.processing.cropping import Rect, crop, random_crop
from visionlab.processing.orientation import RotateAngle, FlipCode, rotate, flip

rng = np.random.default_rng(0)
image = rng.uniform(0, 255, size=(64, 64, 3)).astype(np.float32)

hsv = bgr_to_hsv(image)          # every channel scaled to [0, 255]
back = hsv_to_bgr(hsv)           # truncated to whole numbers in [0, 255]
gray = to_grayscale(image)       # shape (64, 64)

smooth = gaussian_blur(image, 5)
denoised = median_blur(image, 3)
sharp = unsharp_mask(image, sigma=1.0, alpha=1.5)

small = resize(image, 32, 16)    # width 32, height 16, nearest neighbour
framed = pad(gray, 2, 0.0)       # shape (68, 68)

patch = crop(image, Rect(x=8, y=8, width=16, height=16))
sample = random_crop(image, 16, 16, rng)

turned = rotate(image, RotateAngle.CLOCKWISE_90)
mirrored = flip(image, FlipCode.HORIZONTAL)
```

Modules in `visionlab.processing`:

- `color`: `bgr_to_hsv`, `hsv_to_bgr`, `to_grayscale` (0.299 R + 0.587 G +
  0.114 B) and `convert_color_space` with `ColorSpace.BGR_TO_HSV` or
  `ColorSpace.HSV_TO_BGR`. All take 3-channel images.
- `resizing`: `resize` (nearest neighbour, 1- or 3-channel), `normalize`
  (`(pixel - mean[c]) / std[c]` per channel) and `pad` (constant border;
  single-channel images come back as `(height, width)` arrays).
- `cropping`: `crop` with a frozen `Rect(x, y, width, height)` and
  `random_crop`, which picks a uniformly random position using an optional
  `numpy.random.Generator`.
- `orientation`: `rotate` clockwise by `RotateAngle.CLOCKWISE_90`,
  `CLOCKWISE_180` or `CLOCKWISE_270`; `flip` with `FlipCode.VERTICAL`,
  `HORIZONTAL` or `BOTH`.
- `blur`: `gaussian_kernel`, `gaussian_blur` (sigma is `ksize / 3`),
  `median_blur`, `unsharp_mask` (kernel size `round(3 * sigma) * 2 + 1`,
  result clamped to [0, 255]) and `bilateral_filter`. These take
  `(height, width, channels)` images; neighbours outside the image repeat the
  nearest edge pixel.

## Neural-network building blocks

`visionlab.nn` holds the pieces of a dense classifier:

- `activation`: `ReLUActivation`, `SigmoidActivation` and
  `SoftmaxActivation` (row-wise), each callable and with a `derivative`
  method. The sigmoid derivative expects the sigmoid's output, and the softmax
  derivative is all ones because its gradient is folded into the loss.
- `layer`: `Layer` and the ready-made `ReLU`, `Sigmoid` and `Softmax` layers.
  A layer computes `activation(x @ w + b)` in `forward`, starts with weights
  drawn uniformly from [-1, 1] and zero biases, keeps `z`, `a`, `dw` and `db`
  as attributes and offers `activation_derivative()` on the last
  pre-activation.
- `loss`: `CrossEntropyLoss`, returning `-mean(sum(y * log(a)))` with `a`
  clipped away from 0 and 1; its `derivative` is `a - y`, which is correct
  after a softmax layer.
- `early_stopping`: `EarlyStopping(patience, min_delta, store, monitor)`
  watching `Monitor.VALIDATION_LOSS` (lower is better) or
  `Monitor.VALIDATION_ACCURACY` (higher is better). `on_epoch_end` returns
  `True` once `patience` checks have passed without improvement; with
  `store=True` it keeps copies of the weights and biases of the best check.
- `prepare`: `prepare(n, groups, d, rng)` draws `n` shuffled points from up to
  four Gaussian clusters centred at (1, 1), (1, 6), (6, 1) and (6, 6) and
  returns them with one-hot labels.

```python
import numpy as np
from visionlab.nn.prepare import prepare
from visionlab.nn.layer import ReLU, Softmax
from visionlab.nn.loss import CrossEntropyLoss
from visionlab.nn.early_stopping import EarlyStopping, Monitor

rng = np.random.default_rng(42)
x, y = prepare(1000, 4, 2, rng)

hidden = ReLU(2, 16, rng)
output = Softmax(16, 4, rng)
probabilities = output.forward(hidden.forward(x))

loss = CrossEntropyLoss()
print(loss(y, probabilities))
grad = loss.derivative(y, probabilities)

stopper = EarlyStopping(patience=5, monitor=Monitor.VALIDATION_LOSS)
should_stop = stopper.on_epoch_end(0, loss(y, probabilities), [], [])
```

## What the package does not do

- There is no model container, training loop or optimizer. Layers run the
  forward pass and hold their parameters; computing gradients, updating
  weights and deciding when to call `EarlyStopping` is left to the caller.
- There is no thresholding (global, adaptive or Otsu) and no edge detection
  (Sobel, Canny).
- Images are not read from or written to files; bring your own arrays.
- There is no command-line program.