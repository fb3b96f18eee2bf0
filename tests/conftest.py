"""共通フィクスチャ。

- 乱数シード固定
- 設定（環境変数/YAML 由来）の隔離
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common import settings

_ENV_KEYS = ("COLORKIT_CONFIG", "COLORKIT_DEFAULT_HSL_MODE")


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """設定関連の環境変数を外した状態で開始し、終了時に設定を再読込する。"""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    settings.reload_from_env()
    yield monkeypatch
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    settings.reload_from_env()
