import pytest

from sprig.errors import SprigUnboundSymbol, SprigSyntaxError
from sprig.types import Number, String, Symbol, List, EMPTY, Context
from sprig.interpreter import Interpreter


def add_gold(args, ctx):
    """Side effector: (add-gold n) adds n gold to the host's purse."""
    (amount_term,) = args
    from sprig.evaluation.evaluator import evaluate
    ctx, amount = evaluate(amount_term, ctx)
    purse = dict(ctx.state)
    purse["gold"] += amount.value
    return Context(ctx.env, purse), Number(purse["gold"])


def peek_gold(args, ctx):
    """Builtin: reads host state, records it in the environment."""
    gold = Number(ctx.state["gold"])
    return ctx.env.define("seen", gold), gold


@pytest.fixture
def interp():
    interp = Interpreter({"gold": 0}, stdlib=True)
    interp.register_side_effector("add-gold", add_gold)
    interp.register_builtin("peek-gold", peek_gold)
    return interp


def test_eval_returns_last_value(interp):
    assert interp.eval(["define", "a", "2"], ["+", "a", "3"]) == Number(5)
    assert interp.env.lookup("a") == Number(2)


def test_eval_nothing(interp):
    assert interp.eval() == EMPTY


def test_side_effector_updates_host_state(interp):
    assert interp.eval(["add-gold", "5"], ["add-gold", "2"]) == Number(7)
    assert interp.state == {"gold": 7}


def test_builtin_reads_host_state(interp):
    interp.eval(["add-gold", "3"])
    assert interp.eval(["peek-gold"]) == Number(3)
    assert interp.env.lookup("seen") == Number(3)
    assert interp.state == {"gold": 3}


def test_function_cannot_touch_host_state(interp):
    interp.eval(["define", "rich", ["fn", [], ["add-gold", "100"]]])
    assert interp.eval(["rich"]) == Number(100)
    assert interp.state == {"gold": 0}


def test_failure_leaves_context_untouched(interp):
    before = interp.context
    with pytest.raises(SprigUnboundSymbol):
        interp.eval(["add-gold", "1"], ["define", "b", "1"], "missing")
    assert interp.context is before
    assert interp.state == {"gold": 0}


def test_syntax_error_before_running(interp):
    with pytest.raises(SprigSyntaxError):
        interp.eval(["add-gold", "1"], 'bad"token')
    assert interp.state == {"gold": 0}


def test_define_host_value(interp):
    interp.define("greeting", String("hello"))
    assert interp.eval("greeting") == String("hello")


def test_without_stdlib():
    interp = Interpreter(stdlib=False)
    assert "define" not in interp.env
    assert interp.state is None
    # with nothing callable, list heads just win
    assert interp.eval(["1", "define"]) == Number(1)


def test_stdlib_auto_follows_config(monkeypatch):
    monkeypatch.setenv("SPRIG_STDLIB", "0")
    assert "define" not in Interpreter().env
    monkeypatch.setenv("SPRIG_STDLIB", "1")
    assert "define" in Interpreter().env


def test_quote_round_trip(interp):
    assert interp.eval(["quote", ["a", '"b"', "3"]]) == List((Symbol("a"), String("b"), Number(3)))


def test_unbounded_recursion_reaches_host_stack_limit(interp):
    interp.eval(["define", "spin", ["fn", [], ["spin"]]])
    with pytest.raises(RecursionError):
        interp.eval(["spin"])
