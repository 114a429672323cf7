from complexity_cli.analyzer.lattice import ComplexityClass
from complexity_cli.analyzer.methods import analyze_methods, best_method_complexity

SOLUTION_JAVA = """
class Solution {
    public int search(int[] nums, int target) {
        int lo = 0, hi = nums.length - 1;
        while (lo <= hi) {
            int mid = (lo + hi) >>> 1;
            if (nums[mid] == target) return mid;
            if (nums[mid] < target) lo = mid + 1; else hi = mid - 1;
        }
        return -1;
    }

    public void sortAll(int[] nums) {
        Arrays.sort(nums);
    }

    public int pairs(int[] nums) {
        int c = 0;
        for (int i = 0; i < nums.length; i++) {
            for (int j = i + 1; j < nums.length; j++) {
                c++;
            }
        }
        return c;
    }

    public boolean solveBoard(int n) {
        return n > 0;
    }
}
"""


def test_per_method_reports():
    reports = analyze_methods(SOLUTION_JAVA, "java")
    assert [r.name for r in reports] == ["search", "sortAll", "pairs", "solveBoard"]
    assert [r.complexity for r in reports] == [
        ComplexityClass.LOGARITHMIC,
        ComplexityClass.LINEARITHMIC,
        ComplexityClass.QUADRATIC,
        ComplexityClass.CONSTANT,
    ]
    assert [r.is_backtracking for r in reports] == [False, False, False, True]


def test_best_method_complexity_is_lattice_max():
    assert best_method_complexity(SOLUTION_JAVA, "java") is ComplexityClass.QUADRATIC


def test_dialects_without_typed_headers_have_no_reports():
    code = "def f(a):\n    for x in a:\n        pass\n"
    assert analyze_methods(code, "python") == []
    assert best_method_complexity(code, "python") is None


def test_no_methods():
    assert best_method_complexity("int x = 1;", "java") is None
