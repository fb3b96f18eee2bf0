"""
どこで: `common.settings`
何を: 色計算の設定（既定の HSL→RGB 変換モード）を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` や YAML 読み込みの散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

読み込み順（後勝ち）:
1) dataclass の既定値
2) 同梱の `common/configs/default.yaml` の `color:` セクション
3) 環境変数 `COLORKIT_CONFIG` が指す YAML ファイル（指定時のみ）
4) 環境変数 `COLORKIT_DEFAULT_HSL_MODE`

許容誤差は設定項目ではない（`colorkit.tolerance.COLOR_TOLERANCE` の固定定数）。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib.resources import files
from pathlib import Path
from typing import Any, Mapping

from util.utils import load_config

from .env import env_str

logger = logging.getLogger(__name__)

# `colorkit.conversions.HSLToRGBMode` の値と一致させること
HSL_MODE_NAMES = ("foley", "foley_alt", "wikipedia")

_DEFAULT_HSL_MODE = "foley"


@dataclass
class _Settings:
    # HSLColor.to_rgb() の既定アルゴリズム
    DEFAULT_HSL_MODE: str = _DEFAULT_HSL_MODE


_settings = _Settings()


def _load_files() -> Mapping[str, Any]:
    default = files(__package__) / "configs" / "default.yaml"
    override = env_str("COLORKIT_CONFIG")
    return load_config(default, Path(override) if override is not None else None)


def _apply_mode(mode: str, source: str) -> None:
    name = mode.strip().lower()
    if name in HSL_MODE_NAMES:
        _settings.DEFAULT_HSL_MODE = name
    else:
        logger.warning("ignoring unknown default HSL mode from %s: %r", source, mode)


def reload_from_env(config: Mapping[str, Any] | None = None) -> None:
    """構成ファイルと環境変数から設定を再読込。

    - `config` を渡した場合はファイルの代わりにそれを使う（テスト用）。
    - 不正値は警告を出して直前の値（既定値）を維持する。
    """
    _settings.DEFAULT_HSL_MODE = _DEFAULT_HSL_MODE

    cfg = _load_files() if config is None else config
    color_cfg = cfg.get("color")
    if isinstance(color_cfg, Mapping) and "default_hsl_mode" in color_cfg:
        _apply_mode(str(color_cfg["default_hsl_mode"]), "color.default_hsl_mode")

    mode = env_str("COLORKIT_DEFAULT_HSL_MODE")
    if mode is not None:
        _apply_mode(mode, "COLORKIT_DEFAULT_HSL_MODE")


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "HSL_MODE_NAMES", "_Settings"]
