"""
Bundled teaching examples and their pre-authored verdicts.

The heuristic pipeline is imprecise, so any snippet that is exactly one of
these examples (after stripping surrounding whitespace) gets the stored
verdict instead of a heuristic guess.
"""
from __future__ import annotations

from typing import Optional

from .models import ComplexityVerdict, KnownExample


LINEAR_SEARCH_JS = """function linearSearch(arr, target) {
  for (let i = 0; i < arr.length; i++) {
    if (arr[i] === target) {
      return i;
    }
  }
  return -1;
}"""

LINEAR_SEARCH_PY = """def linear_search(arr, target):
    for i in range(len(arr)):
        if arr[i] == target:
            return i
    return -1"""

LINEAR_SEARCH_JAVA = """public int linearSearch(int[] arr, int target) {
    for (int i = 0; i < arr.length; i++) {
        if (arr[i] == target) {
            return i;
        }
    }
    return -1;
}"""

BUBBLE_SORT_JS = """function bubbleSort(arr) {
  for (let i = 0; i < arr.length; i++) {
    for (let j = 0; j < arr.length - i - 1; j++) {
      if (arr[j] > arr[j + 1]) {
        [arr[j], arr[j + 1]] = [arr[j + 1], arr[j]];
      }
    }
  }
  return arr;
}"""

BUBBLE_SORT_PY = """def bubble_sort(arr):
    for i in range(len(arr)):
        for j in range(len(arr) - i - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
    return arr"""

BINARY_SEARCH_JS = """function binarySearch(arr, target) {
  let left = 0;
  let right = arr.length - 1;

  while (left <= right) {
    let mid = Math.floor((left + right) / 2);
    if (arr[mid] === target) return mid;
    if (arr[mid] < target) left = mid + 1;
    else right = mid - 1;
  }
  return -1;
}"""

BINARY_SEARCH_PY = """def binary_search(arr, target):
    left = 0
    right = len(arr) - 1

    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            return mid
        if arr[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1"""

FIBONACCI_PY = """def fibonacci(n):
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)"""

FIBONACCI_JAVA = """public int fibonacci(int n) {
    if (n <= 1) return n;
    return fibonacci(n - 1) + fibonacci(n - 2);
}"""

MERGE_SORT_PY = """def merge_sort(arr):
    if len(arr) <= 1:
        return arr

    mid = len(arr) // 2
    left = merge_sort(arr[:mid])
    right = merge_sort(arr[mid:])

    return merge(left, right)

def merge(left, right):
    result = []
    i = j = 0

    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1

    result.extend(left[i:])
    result.extend(right[j:])
    return result"""

TRIPLE_NESTED_CPP = """void tripleNested(int arr[], int n) {
    for (int i = 0; i < n; i++) {
        for (int j = 0; j < n; j++) {
            for (int k = 0; k < n; k++) {
                // Some operation
                cout << arr[i] << arr[j] << arr[k];
            }
        }
    }
}"""

MATRIX_MULTIPLY_PY = """def matrix_multiply(A, B):
    result = []
    for i in range(len(A)):
        result.append([])
        for j in range(len(B[0])):
            result[i].append(0)
            for k in range(len(B)):
                result[i][j] += A[i][k] * B[k][j]
    return result"""


EXAMPLES: tuple[KnownExample, ...] = (
    KnownExample(
        name="Linear Search (JavaScript)",
        language="JavaScript",
        description="O(n) - Single loop through array",
        code=LINEAR_SEARCH_JS,
        verdict=ComplexityVerdict(
            notation="O(n)",
            explanation="Linear search scans the array once, checking each element at most one time.",
            steps=(
                "Single for-loop that iterates at most n times.",
                "Each iteration does constant work: one comparison and possibly a return.",
                "Total work grows linearly with the number of elements, so time complexity is O(n).",
            ),
        ),
    ),
    KnownExample(
        name="Linear Search (Python)",
        language="Python",
        description="O(n) - Single loop through array",
        code=LINEAR_SEARCH_PY,
        verdict=ComplexityVerdict(
            notation="O(n)",
            explanation="Linear search over a list performs one pass through all elements.",
            steps=(
                "The for-loop runs once for each element in the list (up to n iterations).",
                "Inside the loop there is only a constant-time equality check and return.",
                "Therefore, total time grows proportionally to n → O(n).",
            ),
        ),
    ),
    KnownExample(
        name="Linear Search (Java)",
        language="Java",
        description="O(n) - Single loop through array",
        code=LINEAR_SEARCH_JAVA,
        verdict=ComplexityVerdict(
            notation="O(n)",
            explanation="The Java linearSearch method scans the array once, checking each element at most one time.",
            steps=(
                "The for-loop runs from i = 0 to i < arr.length, so up to n iterations.",
                "Inside the loop, each iteration performs a single equality comparison and possibly returns.",
                "Work per iteration is constant, and total work scales linearly with n → O(n).",
            ),
        ),
    ),
    KnownExample(
        name="Bubble Sort (JavaScript)",
        language="JavaScript",
        description="O(n²) - Nested loops",
        code=BUBBLE_SORT_JS,
        verdict=ComplexityVerdict(
            notation="O(n²)",
            explanation="Bubble sort uses two nested loops, each up to n iterations.",
            steps=(
                "Outer loop runs n times in the worst case.",
                "Inner loop runs up to n times for each outer iteration.",
                "Total comparisons are on the order of n × n = n² → O(n²).",
            ),
        ),
    ),
    # No stored verdict: the heuristic already reports O(n²) for this one.
    KnownExample(
        name="Bubble Sort (Python)",
        language="Python",
        description="O(n²) - Nested loops",
        code=BUBBLE_SORT_PY,
    ),
    KnownExample(
        name="Binary Search (JavaScript)",
        language="JavaScript",
        description="O(log n) - Divide and conquer",
        code=BINARY_SEARCH_JS,
        verdict=ComplexityVerdict(
            notation="O(log n)",
            explanation="Binary search repeatedly halves the search interval.",
            steps=(
                "Each iteration computes a mid index and compares once.",
                "On each step, half of the remaining items are discarded.",
                "The interval size drops from n to 1 in log₂(n) steps → O(log n).",
            ),
        ),
    ),
    KnownExample(
        name="Binary Search (Python)",
        language="Python",
        description="O(log n) - Divide and conquer",
        code=BINARY_SEARCH_PY,
        verdict=ComplexityVerdict(
            notation="O(log n)",
            explanation="Binary search divides the search range by 2 each iteration.",
            steps=(
                "The while-loop continues while the interval [left, right] is non-empty.",
                "Each loop halves the interval by moving either left or right.",
                "Number of iterations is proportional to log₂(n) → O(log n).",
            ),
        ),
    ),
    KnownExample(
        name="Fibonacci (Recursive - Python)",
        language="Python",
        description="O(2ⁿ) - Exponential recursion",
        code=FIBONACCI_PY,
        verdict=ComplexityVerdict(
            notation="O(2ⁿ)",
            explanation="Naive recursive Fibonacci expands into a binary recursion tree.",
            steps=(
                "Each call to fibonacci(n) makes two recursive calls (n-1 and n-2) until the base case.",
                "This forms a branching tree of calls where the number of nodes roughly doubles each level.",
                "Total number of calls grows exponentially with n → O(2ⁿ).",
            ),
        ),
    ),
    KnownExample(
        name="Fibonacci (Recursive - Java)",
        language="Java",
        description="O(2ⁿ) - Exponential recursion",
        code=FIBONACCI_JAVA,
        verdict=ComplexityVerdict(
            notation="O(2ⁿ)",
            explanation="Each Fibonacci call branches into two smaller calls until the base case.",
            steps=(
                "For n > 1 the function calls itself twice: fibonacci(n-1) and fibonacci(n-2).",
                "The recursion tree has about 2ⁿ nodes in the worst case.",
                "Thus the time complexity is exponential → O(2ⁿ).",
            ),
        ),
    ),
    KnownExample(
        name="Merge Sort (Python)",
        language="Python",
        description="O(n log n) - Divide and conquer",
        code=MERGE_SORT_PY,
        verdict=ComplexityVerdict(
            notation="O(n log n)",
            explanation="Merge sort repeatedly splits the array and merges sorted halves.",
            steps=(
                "The array is split in half recursively, giving log₂(n) levels of recursion.",
                "At each level, merge combines all elements with linear work O(n).",
                "Total time is O(n) work per level × log₂(n) levels → O(n log n).",
            ),
        ),
    ),
    KnownExample(
        name="Nested Loops (C++)",
        language="C++",
        description="O(n³) - Triple nested loops",
        code=TRIPLE_NESTED_CPP,
        verdict=ComplexityVerdict(
            notation="O(n³)",
            explanation="Three nested loops each iterate up to n times.",
            steps=(
                "Outer loop over i runs n times.",
                "Middle loop over j runs n times for each i.",
                "Inner loop over k runs n times for each (i, j) pair → n × n × n = n³ iterations.",
            ),
        ),
    ),
    KnownExample(
        name="Matrix Multiplication (Python)",
        language="Python",
        description="O(n³) - Three nested loops",
        code=MATRIX_MULTIPLY_PY,
        verdict=ComplexityVerdict(
            notation="O(n³)",
            explanation="Classic cubic matrix multiplication uses three nested loops.",
            steps=(
                "Outer loop over i runs n times for n rows of the result.",
                "Middle loop over j runs n times for n columns of the result.",
                "Inner loop over k performs n multiplications/additions per (i, j) position.",
                "Total operations scale as n × n × n = n³ → O(n³).",
            ),
        ),
    ),
)

_KNOWN_BY_CODE: dict[str, KnownExample] = {
    example.code.strip(): example for example in EXAMPLES if example.verdict is not None
}


def lookup_known(snippet: str) -> Optional[KnownExample]:
    """
    Find the bundled example whose code is exactly this snippet.

    Args:
        snippet: Raw snippet text; surrounding whitespace is ignored

    Returns:
        The matching example (always one with a stored verdict), or None
    """
    return _KNOWN_BY_CODE.get(snippet.strip())


def list_examples(language: Optional[str] = None) -> list[KnownExample]:
    """List bundled examples, optionally for one language ("all" means every language)."""
    if not language or language.strip().lower() == "all":
        return list(EXAMPLES)
    wanted = language.strip().lower()
    return [example for example in EXAMPLES if example.language.lower() == wanted]
