import argparse
import os
import sys
import warnings

from appdirs import AppDirs

from .errors import ExpressionError, HistoryWarning
from .evaluator import evaluate
from .pipeline import parse
from .render import format_tree

try:
    import readline
except ImportError:
    readline = None


def history_file():
    return os.path.join(AppDirs("yardcalc").user_data_dir, "history")


def load_history(path):
    if readline is None or not os.path.exists(path):
        return
    try:
        readline.read_history_file(path)
    except OSError as e:
        warnings.warn(f"Could not read history from {path}: {e}", HistoryWarning, stacklevel=2)


def save_history(path):
    if readline is None:
        return
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        readline.write_history_file(path)
    except OSError as e:
        warnings.warn(f"Could not write history to {path}: {e}", HistoryWarning, stacklevel=2)


def run(expression, show_tree=False, out=None, err=None):
    """计算一个表达式并输出结果，成功返回 0，失败返回 1。"""
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr
    try:
        ast = parse(expression)
        result = evaluate(ast)
    except ExpressionError as e:
        print(f"err> {e.message}", file=err)
        return 1
    if show_tree:
        print("ast>", file=out)
        print(format_tree(ast), file=out)
    print(f"out> {result}", file=out)
    return 0


def repl(show_tree=False, history=None):
    if history is not None:
        load_history(history)
    try:
        while True:
            try:
                line = input("in> ")
            except (EOFError, KeyboardInterrupt):
                print()
                break
            run(line, show_tree)
    finally:
        if history is not None:
            save_history(history)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="yardcalc",
        description="Evaluates integer arithmetic expressions with + - * / and parentheses")
    parser.add_argument("expression", nargs="?",
                        help="expression to evaluate; read interactively when omitted")
    parser.add_argument("-t", "--tree", dest="tree", action="store_true", default=False,
                        help="print the syntax tree before the result")
    parser.add_argument("--no-history", dest="history", action="store_false", default=True,
                        help="do not load or save the interactive history")
    args = parser.parse_args(argv)

    if args.expression is not None:
        return run(args.expression, args.tree)
    return repl(args.tree, history_file() if args.history else None)
