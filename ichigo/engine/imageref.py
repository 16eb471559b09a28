"""References to images stored in an asset tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from PIL import Image

_image_cache: dict[tuple[Any, str], Image.Image] = {}


@dataclass(eq=False)
class ImageRef:
    """Loads an image by path from an asset tree.

    The assets are a directory-like object with joinpath (a pathlib.Path or
    an importlib.resources traversable). Loading the same path from the same
    assets again reuses the cached image.
    """

    path: str = ""

    _image: Image.Image | None = field(default=None, init=False, repr=False)

    def __str__(self) -> str:
        return "ImageRef{" + self.path + "}"

    def image(self) -> Image.Image | None:
        """Return the image, or None if it has not been loaded."""
        return self._image

    def load(self, assets: Any) -> None:
        """Load the image, from the cache if possible."""
        key = (assets, self.path)
        cached = _image_cache.get(key)
        if cached is not None:
            self._image = cached
            return
        with assets.joinpath(self.path).open("rb") as f:
            img = Image.open(f)
            img.load()
        self._image = img
        _image_cache[key] = img