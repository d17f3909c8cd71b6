"""
どこで: `util.utils`。
何を: プロジェクトの YAML 設定（`configs/default.yaml` → ルート `config.yaml`）を辞書として読む。
なぜ: ランナーが引数で決まらない値を設定ファイルから補えるようにするため。
     ファイルが無い/壊れている場合も起動は止めない（警告して空扱い）。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

# 後ろほど優先（トップレベルのキー単位で上書き）
CONFIG_FILES = ("configs/default.yaml", "config.yaml")
_ROOT_MARKERS = (".git", "pyproject.toml", "configs")


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.warning("設定ファイルを読み込めません: %s (%s)", path, e)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("設定ファイルの最上位がマッピングではありません: %s", path)
        return {}
    return data


def _find_project_root(start: Path) -> Path:
    """`start` から上へ辿り、`.git`/`pyproject.toml`/`configs` のいずれかを持つ最初のディレクトリ。

    見つからなければ `<start>/../..`（`<repo>/src/util` から呼ばれた場合の `<repo>`）。
    """
    here = start.resolve()
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return here.parent.parent


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """設定を読み込んで返す。どのファイルも無い/読めない場合は `{}`。"""
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    merged: Dict[str, Any] = {}
    for rel in CONFIG_FILES:
        path = project_root / rel
        if path.is_file():
            merged.update(_safe_load_yaml(path))
    return merged


def config_section(name: str, config: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """トップレベル節（例: `snowflake`）。無い/マッピングでなければ `{}`。"""
    section = (load_config() if config is None else config).get(name)
    return dict(section) if isinstance(section, dict) else {}


__all__ = ["load_config", "config_section", "CONFIG_FILES"]
