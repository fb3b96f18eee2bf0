"""
どこで: `util.utils`
何を: YAML 構成ファイルの読み込み（フェイルソフト）。
なぜ: 既定の変換モードを、コードを変えずに差し替えられるようにするため。

ディレクトリを遡った探索は行わない。読むのは呼び出し側が明示したファイルのみ。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Union

import yaml

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

logger = logging.getLogger(__name__)

ConfigSource = Union[Path, "Traversable"]


def _safe_load_yaml(path: ConfigSource) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("failed to load config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_config(default: ConfigSource, override: ConfigSource | None = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `default`（パッケージ同梱の既定構成）
    2) `override`（指定時のみ。ベースに上書き）

    - 存在しない/不正なファイルは空辞書として扱う（override の欠落は警告）。
    - ネストした辞書のディープマージは行わず、トップレベルのみ上書き。
    """
    base: Dict[str, Any] = {}
    if default.is_file():
        base.update(_safe_load_yaml(default))

    if override is not None:
        if override.is_file():
            base.update(_safe_load_yaml(override))
        else:
            logger.warning("config override not found: %s", override)

    return base


__all__ = ["load_config"]
