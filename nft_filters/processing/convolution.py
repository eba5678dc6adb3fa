from __future__ import annotations

from typing import Sequence, Tuple

from .buffer import PixelBuffer
from ..errors import InvalidParameter

Kernel = Tuple[
    Tuple[float, float, float],
    Tuple[float, float, float],
    Tuple[float, float, float],
]

SHARPEN_KERNEL: Kernel = (
    (0.0, -1.0, 0.0),
    (-1.0, 5.0, -1.0),
    (0.0, -1.0, 0.0),
)

EMBOSS_KERNEL: Kernel = (
    (-2.0, -1.0, 0.0),
    (-1.0, 1.0, 1.0),
    (0.0, 1.0, 2.0),
)


def validate_kernel(kernel: Sequence[Sequence[float]]) -> Kernel:
    if len(kernel) != 3 or any(len(row) != 3 for row in kernel):
        raise InvalidParameter("Convolution kernels must be 3x3")
    return tuple(tuple(float(weight) for weight in row) for row in kernel)  # type: ignore[return-value]


def _clamp(value: float) -> int:
    return int(min(255.0, max(0.0, value)))


def apply_convolution(buffer: PixelBuffer, kernel: Sequence[Sequence[float]]) -> PixelBuffer:
    """Convolve every interior pixel of ``buffer`` with a 3x3 ``kernel``.

    Weights are used as given; nothing is normalised. All four channels,
    alpha included, go through the same weighted sum. The outermost ring of
    pixels is never computed and stays transparent black in the result, so an
    image narrower or shorter than three pixels comes back fully zeroed.
    """

    weights = validate_kernel(kernel)
    width, height = buffer.size
    out = PixelBuffer.blank(width, height)
    src = buffer._access()
    dst = out._access()

    taps = [
        (kx - 1, ky - 1, weights[ky][kx])
        for ky in range(3)
        for kx in range(3)
        if weights[ky][kx] != 0.0
    ]

    for y in range(1, height - 1):
        for x in range(1, width - 1):
            sum_r = sum_g = sum_b = sum_a = 0.0
            for dx, dy, weight in taps:
                r, g, b, a = src[x + dx, y + dy]
                sum_r += weight * r
                sum_g += weight * g
                sum_b += weight * b
                sum_a += weight * a
            dst[x, y] = (_clamp(sum_r), _clamp(sum_g), _clamp(sum_b), _clamp(sum_a))

    return out
