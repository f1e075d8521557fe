from __future__ import annotations

from pathlib import Path

import pytest

from minigames.assets import AssetProvider
from minigames.configs.game_config import ASSET_PATHS
from minigames.core.errors import AssetLoadError


def _fake_loader(tag):
    def load(path: Path):
        return (tag, path.name)
    return load


@pytest.fixture()
def soccer_dir(tmp_path):
    for rel in ASSET_PATHS["soccer"].values():
        (tmp_path / rel).write_bytes(b"\x00")
    return tmp_path


def test_all_assets_resolve(soccer_dir) -> None:
    provider = AssetProvider(
        soccer_dir,
        ASSET_PATHS["soccer"],
        texture_loader=_fake_loader("texture"),
        sound_loader=_fake_loader("sound"),
    )
    report = provider.load()

    assert report.ok
    assert sorted(report.loaded) == sorted(ASSET_PATHS["soccer"])
    assert provider.texture("ball") == ("texture", "ball.png")
    assert provider.sound("kick") == ("sound", "kick.wav")


def test_missing_file_falls_back_to_none(soccer_dir, caplog) -> None:
    (soccer_dir / "cpu.png").unlink()
    provider = AssetProvider(
        soccer_dir,
        ASSET_PATHS["soccer"],
        texture_loader=_fake_loader("texture"),
        sound_loader=_fake_loader("sound"),
    )

    report = provider.load()

    assert not report.ok
    assert list(report.failed) == ["opponent"]
    assert provider.texture("opponent") is None
    assert provider.texture("player") is not None
    assert "Using fallback for opponent" in caplog.text


def test_undecodable_file_falls_back_to_none(soccer_dir) -> None:
    def broken(path: Path):
        raise OSError("bad header")

    provider = AssetProvider(
        soccer_dir,
        ASSET_PATHS["soccer"],
        texture_loader=broken,
        sound_loader=_fake_loader("sound"),
    )
    report = provider.load()

    assert set(report.failed) == {"player", "opponent", "ball"}
    assert "bad header" in report.failed["ball"]
    assert provider.sound("goal") == ("sound", "goal.wav")


def test_load_one_raises_asset_error(tmp_path) -> None:
    provider = AssetProvider(tmp_path, {"player": "nope.png"}, texture_loader=_fake_loader("texture"))
    with pytest.raises(AssetLoadError):
        provider._load_one("player", "nope.png")


def test_unknown_name_is_none(tmp_path) -> None:
    provider = AssetProvider(tmp_path, {})
    provider.load()
    assert provider.get("anything") is None
