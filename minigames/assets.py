"""
Texture and sound lookup with graceful fallback.

A missing or broken file never stops a game: the failure is logged, listed in
the report, and the asset resolves to None so the renderer draws a plain
shape (or stays silent) instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from minigames.core.errors import AssetLoadError

logger = logging.getLogger(__name__)

SOUND_SUFFIXES = {".wav", ".ogg", ".mp3"}

Loader = Callable[[Path], Any]


def _arcade_texture(path: Path):
    import arcade
    return arcade.load_texture(path)


def _arcade_sound(path: Path):
    import arcade
    return arcade.load_sound(path)


@dataclass
class AssetReport:
    loaded: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)  # name -> reason

    @property
    def ok(self) -> bool:
        return not self.failed


class AssetProvider:
    """Resolves the named assets of one game relative to an asset directory"""

    def __init__(
        self,
        asset_dir,
        paths: Dict[str, str],
        texture_loader: Optional[Loader] = None,
        sound_loader: Optional[Loader] = None,
    ):
        self.asset_dir = Path(asset_dir)
        self.paths = dict(paths)
        self.texture_loader = texture_loader or _arcade_texture
        self.sound_loader = sound_loader or _arcade_sound
        self._assets: Dict[str, Any] = {}
        self.report: Optional[AssetReport] = None

    def _load_one(self, name: str, rel_path: str):
        path = self.asset_dir / rel_path
        if not path.is_file():
            raise AssetLoadError(f"Asset file not found: {path}")
        loader = self.sound_loader if path.suffix.lower() in SOUND_SUFFIXES else self.texture_loader
        try:
            return loader(path)
        except OSError as e:
            raise AssetLoadError(f"Could not decode {path}: {e}") from e

    def load(self) -> AssetReport:
        """Resolve every asset; failures fall back to None"""
        report = AssetReport()
        for name, rel_path in self.paths.items():
            try:
                self._assets[name] = self._load_one(name, rel_path)
                report.loaded.append(name)
            except AssetLoadError as e:
                logger.warning("Using fallback for %s: %s", name, e)
                self._assets[name] = None
                report.failed[name] = str(e)
        self.report = report
        return report

    def get(self, name: str):
        return self._assets.get(name)

    def texture(self, name: str):
        return self.get(name)

    def sound(self, name: str):
        return self.get(name)
