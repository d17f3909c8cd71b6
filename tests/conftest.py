"""共通フィクスチャ。

- 偽の表示面（ウィンドウを開かない）
- 代表的な端点
"""

from __future__ import annotations

import pytest

from engine.core.point import Point
from tests._utils.dummies import FakeSurface


@pytest.fixture()
def fake_surface_factory():
    """`(title, w, h) -> FakeSurface` を返し、生成した表示面を `.created` に溜める。"""
    created: list[FakeSurface] = []

    def _factory(title: str, width: int, height: int) -> FakeSurface:
        surface = FakeSurface(width, height)
        created.append(surface)
        return surface

    _factory.created = created  # type: ignore[attr-defined]
    return _factory


@pytest.fixture()
def p0() -> Point:
    return Point(0.0, 0.0)


@pytest.fixture()
def p1() -> Point:
    return Point(300.0, 0.0)

