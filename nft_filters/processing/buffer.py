from __future__ import annotations

from typing import Iterator, Tuple

from PIL import Image

from ..errors import InvalidParameter

Pixel = Tuple[int, int, int, int]


class PixelBuffer:
    """A fixed-size grid of RGBA pixels, 8 bits per channel.

    The pixels live in a Pillow ``RGBA`` image owned by the buffer. Callers
    never get that image back directly; ``to_image`` hands out a copy so a
    buffer cannot be mutated behind its back.
    """

    __slots__ = ("_img",)

    def __init__(self, img: Image.Image) -> None:
        if img.mode != "RGBA":
            raise InvalidParameter(f"PixelBuffer requires RGBA, got {img.mode}")
        width, height = img.size
        if width <= 0 or height <= 0:
            raise InvalidParameter(f"Invalid buffer size {width}x{height}")
        self._img = img

    @classmethod
    def blank(cls, width: int, height: int) -> "PixelBuffer":
        if width <= 0 or height <= 0:
            raise InvalidParameter(f"Invalid buffer size {width}x{height}")
        # Every channel starts at zero, alpha included.
        return cls(Image.new("RGBA", (width, height), (0, 0, 0, 0)))

    @classmethod
    def from_image(cls, img: Image.Image) -> "PixelBuffer":
        rgba = img.convert("RGBA") if img.mode != "RGBA" else img.copy()
        return cls(rgba)

    @property
    def width(self) -> int:
        return self._img.size[0]

    @property
    def height(self) -> int:
        return self._img.size[1]

    @property
    def size(self) -> Tuple[int, int]:
        return self._img.size

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")

    def get_pixel(self, x: int, y: int) -> Pixel:
        self._check(x, y)
        return self._img.getpixel((x, y))

    def put_pixel(self, x: int, y: int, rgba: Pixel) -> None:
        self._check(x, y)
        self._img.putpixel((x, y), tuple(rgba))

    def _access(self):
        return self._img.load()

    def pixels(self) -> Iterator[Pixel]:
        """Yield every pixel in row-major order."""
        src = self._access()
        for y in range(self.height):
            for x in range(self.width):
                yield src[x, y]

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self._img.copy())

    def to_image(self) -> Image.Image:
        return self._img.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.size == other.size and self._img.tobytes() == other._img.tobytes()

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"
