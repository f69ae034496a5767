import pytest

from bigo.halving import halving_evidence, has_divide_by_two, has_merge_hint


@pytest.mark.parametrize(
    "code",
    [
        "mid = (left + right) / 2",
        "mid = (lo + hi) // 2",
        "mid = lo + ((hi - lo) >> 1)",
        "n >>= 1",
        "let mid = Math.floor((l + r) / 2);",
        "n /= 2",
        "mid = (lo + hi) >>> 1",
    ],
)
def test_halving_detected(code):
    assert has_divide_by_two(code)


@pytest.mark.parametrize(
    "code",
    [
        "x = total / 20",
        "y = a >> 12",
        "for i in range(n):\n    print(i)",
        "",
    ],
)
def test_no_halving(code):
    assert not has_divide_by_two(code)


def test_evidence_names():
    assert halving_evidence("mid = (left + right) // 2") == [
        "divide-by-two",
        "floor-divide-by-two",
        "midpoint-of-bounds",
    ]
    assert halving_evidence("let mid = Math.floor((left + right) / 2);") == [
        "divide-by-two",
        "floor-of-midpoint",
        "midpoint-of-bounds",
    ]
    assert halving_evidence("n = n >> 1") == ["shift-right-by-one"]


def test_merge_hint():
    assert has_merge_hint("def merge_sort(arr):")
    assert has_merge_hint("const parts = s.Split(',');")
    assert not has_merge_hint("def add(a, b):\n    return a + b")
