from pytest import raises

from yardcalc import evaluate, NumberNode, BinaryOpNode, DivisionByZeroError, EvaluationError
from yardcalc.evaluator import truncdiv


def N(value):
    return NumberNode(value)


def B(op, left, right):
    return BinaryOpNode(op, left, right)


class TestEvaluator(object):
    def test_number(self):
        assert evaluate(N(7)) == 7

    def test_operators(self):
        assert evaluate(B("+", N(2), N(3))) == 5
        assert evaluate(B("-", N(2), N(3))) == -1
        assert evaluate(B("*", N(2), N(3))) == 6
        assert evaluate(B("/", N(7), N(2))) == 3

    def test_nested(self):
        tree = B("*", B("+", N(2), N(3)), B("-", N(10), N(6)))
        assert evaluate(tree) == 20

    def test_pure(self):
        tree = B("-", B("/", N(9), N(2)), N(1))
        assert evaluate(tree) == evaluate(tree) == 3

    def test_no_wraparound(self):
        tree = B("*", N(2 ** 31 - 1), N(2 ** 31 - 1))
        assert evaluate(tree) == (2 ** 31 - 1) ** 2

    def test_division_by_zero(self):
        with raises(DivisionByZeroError):
            evaluate(B("/", N(5), N(0)))

    def test_division_by_computed_zero(self):
        with raises(EvaluationError):
            evaluate(B("/", N(5), B("-", N(3), N(3))))

    def test_unknown_node(self):
        with raises(TypeError):
            evaluate("1")


class TestTruncDiv(object):
    def test_truncates_toward_zero(self):
        assert truncdiv(7, 2) == 3
        assert truncdiv(-7, 2) == -3
        assert truncdiv(7, -2) == -3
        assert truncdiv(-7, -2) == 3
        assert truncdiv(0, 5) == 0
        assert truncdiv(6, 3) == 2
        assert truncdiv(-6, 3) == -2

    def test_zero(self):
        with raises(DivisionByZeroError):
            truncdiv(0, 0)


class TestDeepTrees(object):
    def test_left_deep(self):
        tree = N(0)
        for i in range(1, 3000):
            tree = B("+", tree, N(i))
        assert evaluate(tree) == sum(range(3000))

    def test_right_deep(self):
        tree = N(1)
        for _ in range(3000):
            tree = B("-", N(1), tree)
        # 1 - (1 - (1 - ... 1)) 交替为 0 和 1
        assert evaluate(tree) == 1

    def test_left_before_right(self):
        with raises(DivisionByZeroError):
            evaluate(B("+", B("/", N(1), N(0)), B("/", N(2), N(0))))
