from __future__ import annotations

import pytest

from common.base_registry import BaseRegistry


def test_register_and_get_with_normalization() -> None:
    reg = BaseRegistry("shape")

    @reg.register()
    def KochLike():  # noqa: N802 (テスト用)
        return 0

    assert "koch_like" in reg
    assert reg.get("KochLike") is KochLike
    assert reg.get("koch-like") is KochLike
    assert reg.names() == ["koch_like"]
    assert len(reg) == 1


@pytest.mark.parametrize(
    "name, key",
    [("KochCurve", "koch_curve"), ("koch-curve", "koch_curve"), ("HTTPServer", "http_server"), (" Flake2D ", "flake2_d")],
)
def test_normalize_key(name: str, key: str) -> None:
    assert BaseRegistry.normalize_key(name) == key


def test_duplicate_name_and_discard() -> None:
    reg = BaseRegistry("shape")
    reg.add("sample", len)
    reg.add("Sample", len)  # 同一オブジェクトは再登録できる

    with pytest.raises(ValueError, match="shape 'sample'"):
        reg.register("sample")(lambda: 2)

    reg.discard("Sample")
    assert "sample" not in reg
    reg.discard("nonexistent")  # 例外にならない


def test_missing_name_is_key_error() -> None:
    with pytest.raises(KeyError, match="not registered"):
        BaseRegistry().get("nope")


@pytest.mark.parametrize("bad, exc", [("", ValueError), ("   ", ValueError), (None, TypeError), (3, TypeError)])
def test_invalid_keys(bad, exc) -> None:
    with pytest.raises(exc):
        BaseRegistry.normalize_key(bad)


def test_contains_tolerates_non_strings_and_blank() -> None:
    reg = BaseRegistry()
    assert 3 not in reg
    assert "" not in reg


def test_iteration_is_sorted_and_clear() -> None:
    reg = BaseRegistry()
    reg.add("b", len)
    reg.add("a", abs)
    assert list(reg) == ["a", "b"]
    reg.clear()
    assert reg.names() == []
