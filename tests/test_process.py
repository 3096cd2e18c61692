from pytest import raises

from yardcalc import (process, parse, Lexer, ShuntingYardParser, BinaryOpNode, NumberNode,
                      ExpressionError, UnknownCharacterError, NumberOverflowError,
                      MismatchedParenthesesError, MalformedExpressionError, DivisionByZeroError)


class TestProcess(object):
    def test_arithmetic(self):
        assert process("1+2") == 3
        assert process("2+3*4") == 14
        assert process("(2+3)*4") == 20
        assert process("100/7") == 14
        assert process("2*(3+4)*5") == 70

    def test_left_associative(self):
        assert process("10-2-3") == 5
        assert process("8/4/2") == 1

    def test_whitespace(self):
        assert process(" 2 + 3 ") == process("2+3") == 5
        assert process("\t2*\n3") == 6

    def test_truncating_division(self):
        assert process("7/2") == 3
        assert process("(0-7)/2") == -3
        assert process("(1-8)/(0-2)") == 3

    def test_negative_result(self):
        assert process("2-5") == -3

    def test_mismatched(self):
        with raises(MismatchedParenthesesError):
            process("(1+2")
        with raises(MismatchedParenthesesError):
            process("1+2)")

    def test_malformed(self):
        with raises(MalformedExpressionError):
            process("1+")
        with raises(MalformedExpressionError):
            process("")
        with raises(MalformedExpressionError):
            process("   \t")

    def test_unknown_character(self):
        with raises(UnknownCharacterError):
            process("1+a")

    def test_lexing_before_parsing(self):
        with raises(UnknownCharacterError):
            process(")a")

    def test_overflow(self):
        with raises(NumberOverflowError):
            process("4294967296")

    def test_division_by_zero(self):
        with raises(DivisionByZeroError):
            process("5/0")
        with raises(DivisionByZeroError):
            process("1/(2-2)")

    def test_all_errors_share_base(self):
        for s in ["1+a", "(1", "1+", "5/0", "99999999999"]:
            with raises(ExpressionError):
                process(s)

    def test_custom_stages(self):
        parser = ShuntingYardParser([("left", ["+", "-", "*", "/"])])
        assert process("2+3*4", parser=parser) == 20
        assert process("99999999999", lexer=Lexer(max_value=None)) == 99999999999


class TestParse(object):
    def test_returns_tree(self):
        assert parse("1*2") == BinaryOpNode("*", NumberNode(1), NumberNode(2))

    def test_blank(self):
        with raises(MalformedExpressionError):
            parse("\n")


class TestLongInput(object):
    def test_huge_literal(self):
        with raises(NumberOverflowError):
            process("9" * 5000)

    def test_long_chain(self):
        assert process("+".join(["1"] * 2000)) == 2000
        assert process("-".join(["1"] * 2000)) == 1 - 1999

    def test_deep_parens(self):
        assert process("(" * 2000 + "7" + ")" * 2000) == 7

    def test_long_chain_tree(self):
        tree = parse("*".join(["1"] * 2000))
        assert tree == parse("*".join(["1"] * 2000))
        assert tree != parse("*".join(["1"] * 1999))
        assert hash(tree) == hash(parse("*".join(["1"] * 2000)))
