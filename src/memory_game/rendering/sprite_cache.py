from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class SpriteCache:
    """Caches textures for picture tiles, keyed by path and target size."""

    def __init__(self) -> None:
        self._texture_cache: dict[tuple[str, int | None], object] = {}

    def get_picture_texture(self, arcade_module, path: str, *, max_dim: int | None = 128):
        key = (path, max_dim)
        if key in self._texture_cache:
            return self._texture_cache[key]
        texture = self._load_smoothed_texture(arcade_module, Path(path), max_dim=max_dim)
        self._texture_cache[key] = texture
        return texture

    def _load_smoothed_texture(self, arcade_module, path: Path, max_dim: int | None = None):
        from PIL import Image

        if not path.exists():
            logger.warning("tile picture missing: %s", path)
            return None
        try:
            img = Image.open(path).convert("RGBA")
        except OSError:
            logger.warning("tile picture unreadable: %s", path)
            return None
        if max_dim is not None and max(img.size) > max_dim:
            w, h = img.size
            scale = max_dim / max(w, h)
            new_size = (max(1, int(w * scale)), max(1, int(h * scale)))
            img = img.resize(new_size, Image.Resampling.LANCZOS)
        return arcade_module.Texture(img, hash=f"tile:{path.name}:{max_dim}")
