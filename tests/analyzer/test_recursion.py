from complexity_cli.analyzer.recursion import (
    RecursionSignal,
    analyze_recursion,
    function_signal,
)


def test_no_recursion():
    code = "def add(a, b):\n    return a + b\n"
    assert analyze_recursion(code, "python") == RecursionSignal()


def test_fibonacci_has_multiple_calls():
    code = "function fib(n) {\n  if (n <= 1) return n;\n  return fib(n - 1) + fib(n - 2);\n}\n"
    signal = analyze_recursion(code, "javascript")
    assert signal.has_recursion
    assert signal.multiple_recursive_calls
    assert not signal.processes_all_elements
    assert not signal.is_permutation


def test_linear_recursion():
    code = """
def total(arr, i):
    if i == len(arr):
        return 0
    return arr[i] + total(arr, i + 1)
"""
    signal = analyze_recursion(code, "python")
    assert signal.has_recursion
    assert not signal.multiple_recursive_calls
    assert not signal.is_divide_and_conquer


def test_permutation_by_name():
    code = """
def permute(nums, start):
    if start == len(nums):
        return
    for i in range(start, len(nums)):
        permute(nums, start + 1)
"""
    assert analyze_recursion(code, "python").is_permutation


def test_permutation_by_destructuring_swap():
    code = """
function generate(arr, k) {
  for (let i = k; i < arr.length; i++) {
    [arr[k], arr[i]] = [arr[i], arr[k]];
    generate(arr, k + 1);
    [arr[k], arr[i]] = [arr[i], arr[k]];
  }
}
"""
    signal = analyze_recursion(code, "javascript")
    assert signal.is_permutation
    assert signal.processes_all_elements


def test_permutation_by_tuple_swap():
    body = """
    for i in range(k, len(a)):
        a[k], a[i] = a[i], a[k]
        arrange(a, k + 1)
"""
    assert function_signal("arrange", body).is_permutation


def test_divide_and_conquer_by_halving():
    code = """
def halve(arr, lo, hi):
    if lo >= hi:
        return lo
    mid = (lo + hi) // 2
    return halve(arr, lo, mid)
"""
    signal = analyze_recursion(code, "python")
    assert signal.is_divide_and_conquer
    assert not signal.multiple_recursive_calls
    assert not signal.processes_all_elements


def test_signals_are_or_combined_over_functions():
    code = """
def walk(i):
    if i == 0:
        return 0
    return walk(i - 1)

def fib(n):
    if n < 2:
        return n
    return fib(n - 1) + fib(n - 2)
"""
    signal = analyze_recursion(code, "python")
    assert signal.has_recursion
    assert signal.multiple_recursive_calls


def test_java_method_recursion():
    code = """
class Solution {
    public int depth(TreeNode node) {
        if (node == null) return 0;
        return 1 + Math.max(depth(node.left), depth(node.right));
    }
}
"""
    signal = analyze_recursion(code, "java")
    assert signal.has_recursion
    assert signal.multiple_recursive_calls


def test_merge_combines_fields():
    left = RecursionSignal(has_recursion=True, is_permutation=True)
    right = RecursionSignal(has_recursion=True, processes_all_elements=True)
    merged = left.merge(right)
    assert merged.is_permutation
    assert merged.processes_all_elements
    assert not merged.multiple_recursive_calls


def test_one_line_def_self_call():
    code = "def fact(n): return 1 if n == 0 else n * fact(n - 1)\n"
    signal = analyze_recursion(code, "python")
    assert signal.has_recursion
    assert not signal.multiple_recursive_calls
