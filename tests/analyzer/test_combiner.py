import pytest

from complexity_cli.analyzer.combiner import (
    RULES,
    AnalysisResult,
    Rule,
    classify,
    explain,
)
from complexity_cli.analyzer.lattice import ComplexityClass

C = ComplexityClass

BINARY_SEARCH_PY = """
def binary_search(arr, target):
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            return mid
        elif arr[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1
"""

BINARY_SEARCH_JS = """
function binarySearch(arr, target) {
  let left = 0, right = arr.length - 1;
  while (left <= right) {
    const mid = Math.floor((left + right) / 2);
    if (arr[mid] === target) return mid;
    if (arr[mid] < target) left = mid + 1;
    else right = mid - 1;
  }
  return -1;
}
"""

N_QUEENS_JAVA = """
class NQueens {
    boolean isSafe(int[][] board, int row, int col, int n) {
        for (int i = 0; i < col; i++)
            if (board[row][i] == 1) return false;
        return true;
    }

    boolean solve(int[][] board, int col, int n) {
        if (col >= n) return true;
        for (int i = 0; i < n; i++) {
            if (isSafe(board, i, col, n)) {
                board[i][col] = 1;
                if (solve(board, col + 1, n)) return true;
                board[i][col] = 0;
            }
        }
        return false;
    }
}
"""

PERMUTE_PY = """
def permute(nums, start):
    if start == len(nums):
        print(nums)
        return
    for i in range(start, len(nums)):
        nums[start], nums[i] = nums[i], nums[start]
        permute(nums, start + 1)
        nums[start], nums[i] = nums[i], nums[start]
"""

PERMUTE_JAVA = """
class Perm {
    void permute(String str, int l, int r) {
        if (l == r) {
            System.out.println(str);
            return;
        }
        for (int i = l; i <= r; i++) {
            str = swap(str, l, i);
            permute(str, l + 1, r);
            str = swap(str, l, i);
        }
    }
}
"""

NESTED_JS = """
function countPairs(arr) {
  let count = 0;
  for (let i = 0; i < arr.length; i++) {
    for (let j = 0; j < arr.length; j++) {
      count += arr[i] * arr[j];
    }
  }
  return count;
}
"""

NESTED_PY = """
def count_pairs(arr):
    total = 0
    for i in range(len(arr)):
        for j in range(len(arr)):
            total += arr[i] * arr[j]
    return total
"""

NESTED_CPP = """
int countPairs(int arr[], int n) {
    int count = 0;
    for (int i = 0; i < n; i++) {
        for (int j = 0; j < n; j++) {
            count++;
        }
    }
    return count;
}
"""

LOOP_AND_SORT_PY = """
def process(items):
    for item in items:
        print(item)
    items.sort()
    return items
"""

LOOP_AND_SORT_JS = """
function process(arr) {
  for (let i = 0; i < arr.length; i++) { console.log(arr[i]); }
  arr.sort((a, b) => a - b);
  return arr;
}
"""

FIB_PY = """
def fib(n):
    if n <= 1:
        return n
    return fib(n - 1) + fib(n - 2)
"""

LINEAR_RECURSION_PY = """
def total(arr, i):
    if i == len(arr):
        return 0
    return arr[i] + total(arr, i + 1)
"""

SUBSET_WALK_PY = """
def walk(nums, i):
    if i == len(nums):
        return
    for x in nums:
        print(x)
    walk(nums, i + 1)
    walk(nums, i + 1)
"""

SAMPLES = [
    (BINARY_SEARCH_PY, "python"),
    (BINARY_SEARCH_JS, "javascript"),
    (N_QUEENS_JAVA, "java"),
    (PERMUTE_PY, "python"),
    (PERMUTE_JAVA, "java"),
    (NESTED_JS, "javascript"),
    (NESTED_PY, "python"),
    (NESTED_CPP, "cpp"),
    (LOOP_AND_SORT_PY, "python"),
    (LOOP_AND_SORT_JS, "javascript"),
    (FIB_PY, "python"),
    (LINEAR_RECURSION_PY, "python"),
    ("@@@ ### !!!", "brainfuck"),
]


@pytest.mark.parametrize(
    "code, language, expected",
    [
        (BINARY_SEARCH_PY, "python", (C.LOGARITHMIC, C.CONSTANT)),
        (BINARY_SEARCH_JS, "javascript", (C.LOGARITHMIC, C.CONSTANT)),
        (N_QUEENS_JAVA, "java", (C.FACTORIAL, C.QUADRATIC)),
        (PERMUTE_PY, "python", (C.FACTORIAL, C.LINEAR)),
        (PERMUTE_JAVA, "java", (C.FACTORIAL, C.LINEAR)),
        (NESTED_JS, "javascript", (C.QUADRATIC, C.CONSTANT)),
        (NESTED_PY, "python", (C.QUADRATIC, C.CONSTANT)),
        (NESTED_CPP, "cpp", (C.QUADRATIC, C.CONSTANT)),
        (LOOP_AND_SORT_PY, "python", (C.LINEARITHMIC, C.LINEAR)),
        (LOOP_AND_SORT_JS, "javascript", (C.LINEARITHMIC, C.LINEAR)),
        (FIB_PY, "python", (C.EXPONENTIAL, C.LINEAR)),
        (LINEAR_RECURSION_PY, "python", (C.LINEAR, C.LINEAR)),
    ],
)
def test_classify(code, language, expected):
    assert classify(code, language) == AnalysisResult(*expected)


@pytest.mark.parametrize("code", ["", "@@@ ### !!!", "hello world"])
def test_garbage_input_is_constant(code):
    assert classify(code, "brainfuck") == AnalysisResult(C.CONSTANT, C.CONSTANT)


def test_missing_language_uses_default_dialect():
    assert classify(NESTED_JS) == classify(NESTED_JS, "javascript")
    assert explain(NESTED_JS).language == "javascript"
    assert explain(NESTED_JS, "klingon").language == "javascript"


def test_language_aliases_resolve():
    assert explain(NESTED_PY, "py").language == "python"
    assert classify(NESTED_PY, "PY") == classify(NESTED_PY, "python")


@pytest.mark.parametrize("code, language", SAMPLES)
def test_classify_is_deterministic(code, language):
    assert classify(code, language) == classify(code, language)


def test_binary_search_wins_over_backtracking():
    code = BINARY_SEARCH_PY + "\ndef is_safe(board):\n    return True\n"
    assert classify(code, "python") == AnalysisResult(C.LOGARITHMIC, C.CONSTANT)


def test_terminal_rule_stops_the_trace():
    explanation = explain(BINARY_SEARCH_PY, "python")
    assert [step.rule for step in explanation.steps] == ["binary_search"]
    assert explanation.steps[0].fired


def test_trace_lists_every_rule_when_nothing_terminates():
    explanation = explain(NESTED_JS, "javascript")
    assert [step.rule for step in explanation.steps] == [rule.name for rule in RULES]
    assert explanation.steps[-1].result == explanation.result


@pytest.mark.parametrize("code, language", SAMPLES)
def test_ranked_estimates_never_decrease_along_the_trace(code, language):
    steps = explain(code, language).steps
    for before, after in zip(steps, steps[1:]):
        if C.LINEAR_EXPONENTIAL in (before.result.time, after.result.time):
            continue
        if after.rule == "recursion":
            continue
        assert after.result.time.rank >= before.result.time.rank
        assert after.result.space.rank >= before.result.space.rank


def test_unranked_class_can_be_overwritten():
    explanation = explain(SUBSET_WALK_PY, "python")
    by_rule = {step.rule: step for step in explanation.steps}
    assert by_rule["recursion"].result.time is C.LINEAR_EXPONENTIAL
    assert explanation.result == AnalysisResult(C.LINEAR, C.LINEAR)


def test_allocation_scales_with_nesting():
    code = """
def table(n):
    grid = []
    for i in range(n):
        for j in range(n):
            grid.append((i, j))
    return grid
"""
    assert classify(code, "python") == AnalysisResult(C.QUADRATIC, C.QUADRATIC)


def test_single_loop_with_allocation_is_linear_space():
    code = """
def copy(items):
    out = []
    for item in items:
        out.append(item)
    return out
"""
    assert classify(code, "python") == AnalysisResult(C.LINEAR, C.LINEAR)


def test_java_methods_raise_time():
    code = """
class Solution {
    public int pairs(int[] nums) {
        int c = 0;
        for (int i = 0; i < nums.length; i++) {
            c++;
        }
        return c;
    }
}
"""
    explanation = explain(code, "java")
    by_rule = {step.rule: step for step in explanation.steps}
    assert by_rule["methods"].fired
    assert explanation.result == AnalysisResult(C.LINEAR, C.CONSTANT)


def test_custom_rule_tuple():
    always_cubic = Rule(
        "always_cubic",
        lambda ctx: True,
        lambda ctx, result: AnalysisResult(C.CUBIC, result.space),
    )
    explanation = explain("x = 1", "python", rules=(always_cubic,))
    assert explanation.result == AnalysisResult(C.CUBIC, C.CONSTANT)
    assert len(explanation.steps) == 1


def test_result_to_dict():
    assert AnalysisResult(C.LINEARITHMIC, C.LINEAR).to_dict() == {
        "time": "O(n log n)",
        "space": "O(n)",
    }


def test_linear_exponential_without_loop_headers():
    code = """
def subsets(nums):
    if not nums:
        return [[]]
    rest = subsets(nums[1:])
    return rest + [[nums[0]] + s for s in subsets(nums[1:])]
"""
    explanation = explain(code, "python")
    by_rule = {step.rule: step for step in explanation.steps}
    assert not by_rule["loops"].fired
    assert explanation.result.time is C.LINEAR_EXPONENTIAL
    assert explanation.result.space is C.LINEAR


def test_loops_rule_is_skipped_without_loops():
    explanation = explain(FIB_PY, "python")
    by_rule = {step.rule: step for step in explanation.steps}
    assert not by_rule["loops"].fired
    assert explanation.result == AnalysisResult(C.EXPONENTIAL, C.LINEAR)


def test_one_line_python_recursion():
    code = "def fact(n): return 1 if n == 0 else n * fact(n - 1)\n"
    assert classify(code, "python") == AnalysisResult(C.LINEAR, C.LINEAR)
