from complexity_cli.analyzer.nesting import BraceNesting, IndentationNesting


def _lines(text):
    return text.strip("\n").splitlines()


def test_indentation_nested_loops():
    code = """
def f(arr):
    for i in arr:
        for j in arr:
            print(i, j)
    return 0
"""
    assert IndentationNesting().max_depth(_lines(code)) == 2


def test_indentation_sequential_loops():
    code = """
for i in range(10):
    print(i)
# a comment between loops
while x:
    x -= 1
"""
    assert IndentationNesting().max_depth(_lines(code)) == 1


def test_indentation_dedent_unwinds_stack():
    code = """
for a in x:
    for b in y:
        pass
    for c in z:
        for d in w:
            for e in v:
                pass
"""
    assert IndentationNesting().max_depth(_lines(code)) == 4


def test_indentation_ignores_comprehensions():
    code = "total = sum(x for x in values)\n"
    assert IndentationNesting().max_depth(_lines(code)) == 0


def test_brace_nested_loops():
    code = """
function f(arr) {
  for (let i = 0; i < arr.length; i++) {
    for (let j = 0; j < arr.length; j++) {
      count++;
    }
  }
}
"""
    assert BraceNesting().max_depth(_lines(code)) == 2


def test_brace_if_block_inside_loop_does_not_close_it():
    code = """
for (i = 0; i < n; i++) {
  if (x) {
  }
  for (j = 0; j < n; j++) {
  }
}
"""
    assert BraceNesting().max_depth(_lines(code)) == 2


def test_brace_sequential_loops():
    code = """
for (i = 0; i < n; i++) {
}
while (k > 0) {
  k--;
}
"""
    assert BraceNesting().max_depth(_lines(code)) == 1


def test_brace_do_while_tail_only_closes():
    code = """
do {
  for (j = 0; j < n; j++) { x++; }
} while (i < n);
"""
    assert BraceNesting().max_depth(_lines(code)) == 2


def test_brace_single_line_loops_do_not_stack():
    code = """
function f(n) {
  for (let i = 0; i < n; i++) sum += i;
  for (let j = 0; j < n; j++) sum += j;
}
"""
    assert BraceNesting().max_depth(_lines(code)) == 1


def test_brace_ignores_loops_in_comments_and_strings():
    code = """
// for (i = 0; i < n; i++) {
const s = "while (true) {";
"""
    assert BraceNesting().max_depth(_lines(code)) == 0
