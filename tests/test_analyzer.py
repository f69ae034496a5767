import pytest

from bigo import ACCURACY_DISCLAIMER, EmptySnippetError, analyze, classify, scan


def nested_for_loops(depth, wrap=False):
    lines = []
    if wrap:
        lines.append("void run(int n) {")
    for level in range(depth):
        lines.append("    " * level + f"for (int i{level} = 0; i{level} < n; i{level}++) {{")
    lines.append("    " * depth + "total++;")
    for level in reversed(range(depth)):
        lines.append("    " * level + "}")
    if wrap:
        lines.append("}")
    return "\n".join(lines)


BINARY_SEARCH_LIKE = """function search(arr, target) {
  let left = 0;
  let right = arr.length - 1;
  while (left < right) {
    const mid = (left + right) / 2;
    if (arr[mid] < target) left = mid + 1;
    else right = mid;
  }
  return left;
}"""

MERGE_SORT_JS = """function mergeSort(arr) {
  if (arr.length <= 1) return arr;
  const mid = Math.floor(arr.length / 2);
  const left = mergeSort(arr.slice(0, mid));
  const right = mergeSort(arr.slice(mid));
  return merge(left, right);
}
function merge(a, b) {
  const out = [];
  while (a.length && b.length) {
    out.push(a[0] < b[0] ? a.shift() : b.shift());
  }
  return out.concat(a, b);
}"""

SNIPPETS = [
    "",
    "x = 1",
    nested_for_loops(2),
    BINARY_SEARCH_LIKE,
    MERGE_SORT_JS,
    "def f(n):\n    if n <= 1: return n\n    return f(n-1) + f(n-2)",
]


@pytest.mark.parametrize("code", [s for s in SNIPPETS if s])
def test_classification_is_deterministic(code):
    assert classify(code) == classify(code)
    assert analyze(code) == analyze(code)
    assert scan(code) == scan(code)


@pytest.mark.parametrize("code", ["", "   ", "\n\t\n"])
def test_empty_input_is_no_input(code):
    with pytest.raises(EmptySnippetError):
        classify(code)
    with pytest.raises(ValueError):
        analyze(code)


@pytest.mark.parametrize(
    "code",
    [
        "x = 1\ny = x * 2\nprint(y)",
        "int a = 5;\nint b = a + 3;",
        "return a + b;",
        "Hello, this is not code at all.",
    ],
)
def test_no_loops_is_constant(code):
    assert classify(code).notation == "O(1)"


@pytest.mark.parametrize("wrap", [False, True])
@pytest.mark.parametrize(
    "depth, notation",
    [(0, "O(1)"), (1, "O(n)"), (2, "O(n²)"), (3, "O(n³)"), (4, "O(n³)")],
)
def test_nesting_monotonicity(depth, notation, wrap):
    assert classify(nested_for_loops(depth, wrap=wrap)).notation == notation


def test_branching_recursion_is_exponential():
    code = "function fib(n) {\n  if (n < 2) return n;\n  return fib(n - 1) + fib(n - 2);\n}"
    assert classify(code).notation == "O(2ⁿ)"


def test_python_branching_recursion_is_exponential():
    code = "def f(n):\n    if n <= 1: return n\n    return f(n-1) + f(n-2)"
    verdict = classify(code)
    assert verdict.notation == "O(2ⁿ)"
    assert verdict.steps[0] == "Found recursive function with 2 recursive calls"


def test_single_call_recursion_is_linear():
    code = "def factorial(n):\n    if n <= 1:\n        return 1\n    return n * factorial(n - 1)"
    assert classify(code).notation == "O(n)"


def test_halving_recursion_is_logarithmic():
    code = "def power(x, n):\n    if n == 0:\n        return 1\n    half = power(x, n // 2)\n    return half * half"
    assert classify(code).notation == "O(log n)"


def test_halving_while_loop_is_logarithmic():
    assert classify(BINARY_SEARCH_LIKE).notation == "O(log n)"


def test_python_halving_while_loop_is_logarithmic():
    code = (
        "def find(items, x):\n"
        "    lo, hi = 0, len(items)\n"
        "    while lo < hi:\n"
        "        mid = (lo + hi) // 2\n"
        "        if items[mid] < x:\n"
        "            lo = mid + 1\n"
        "        else:\n"
        "            hi = mid\n"
        "    return lo"
    )
    assert classify(code).notation == "O(log n)"


def test_merge_pattern_is_linearithmic():
    assert classify(MERGE_SORT_JS).notation == "O(n log n)"


def test_indentation_and_brace_nesting_agree():
    python = "for i in range(n):\n    for j in range(n):\n        total += i * j"
    c_like = "for (int i = 0; i < n; i++) {\n    for (int j = 0; j < n; j++) {\n        total += i * j;\n    }\n}"
    assert classify(python).notation == "O(n²)"
    assert classify(c_like).notation == "O(n²)"


@pytest.mark.parametrize(
    "code",
    [
        "for i in range(n): for j in range(n): print(i, j)",
        "for i in range(n):\n    for j in range(n):\n        print(i, j)",
    ],
)
def test_double_loop_example(code):
    verdict = classify(code)
    assert verdict.notation == "O(n²)"
    assert verdict.steps
    assert any("2 levels" in step for step in verdict.steps)


def test_loop_shape_wins_over_recursion():
    code = "def walk(nodes):\n    for node in nodes:\n        walk(node.children)\n        walk(node.children)"
    signals = scan(code)
    assert signals.recursive_call_sites == 2
    assert signals.loop_count == 1
    assert classify(code).notation == "O(n)"


def test_heuristic_analysis_carries_signals_and_disclaimer():
    result = analyze(nested_for_loops(2, wrap=True))
    assert result.source == "heuristic"
    assert result.disclaimer == ACCURACY_DISCLAIMER
    assert result.matched_example is None
    assert result.signals.max_nesting == 2
    assert result.signals.function_name == "run"
    assert not result.signals.is_indentation_based
