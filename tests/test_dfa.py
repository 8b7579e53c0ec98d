import pytest

from automaton import DFABuilder, NFABuilder
from automaton.errors import DuplicatedTransition


def abc_plus():
    return (
        DFABuilder()
        .add_start(0)
        .add_final(0)
        .add_transition("a", 0, 1)
        .add_transition("b", 1, 2)
        .add_transition("c", 2, 0)
        .finalize()
    )


def test_cycle():
    dfa = abc_plus()
    assert dfa.test("abc")
    assert dfa.test("")
    assert not dfa.test("a")
    assert not dfa.test("ab")
    assert dfa.test("abcabc")
    assert not dfa.test("abca")
    assert not dfa.test("abcab")
    assert dfa.test("abcabcabc")


def test_samples():
    dfa = (
        DFABuilder()
        .add_start(0)
        .add_final(3)
        .add_transition("a", 0, 1)
        .add_transition("c", 0, 3)
        .add_transition("b", 1, 2)
        .add_transition("a", 2, 1)
        .add_transition("c", 2, 3)
        .finalize()
    )
    samples = [
        ("ababac", False),
        ("ababc", True),
        ("", False),
        ("abc", True),
        ("c", True),
        ("ac", False),
        ("ab" * 20 + "c", True),
    ]
    for string, expected in samples:
        assert dfa.test(string) is expected, string


def test_dead_state_stays_dead():
    dfa = abc_plus()
    # "x" has no transition; the rest of the input cannot revive the run
    assert not dfa.test("xabc")
    assert not dfa.test("abxc")
    assert not dfa.test("abcx")


def test_unknown_symbols_reject():
    dfa = abc_plus()
    assert not dfa.test("ABC")
    assert not dfa.test("é")


def test_iterable_input():
    dfa = abc_plus()
    assert dfa.test(["a", "b", "c"])
    assert dfa.test(iter("abcabc"))
    assert not dfa.test(("a", "b"))


def test_deterministic():
    dfa = abc_plus()
    for string in ["", "abc", "ab", "abcabc", "cab"]:
        results = {dfa.test(string) for _ in range(5)}
        assert len(results) == 1


def test_accept_alias():
    dfa = abc_plus()
    assert dfa.accept("abc")
    assert not dfa.accept("ab")


def test_next_state():
    dfa = abc_plus()
    assert dfa.next_state(0, "a") == 1
    assert dfa.next_state(0, "b") is None


def test_duplicated_transition():
    builder = DFABuilder().add_start(0).add_final(1)
    builder.add_transition("a", 0, 1).add_transition("a", 0, 2)
    assert builder.failed
    with pytest.raises(DuplicatedTransition) as excinfo:
        builder.finalize()
    assert excinfo.value.symbol == "a"
    assert excinfo.value.source == 0
    assert excinfo.value == DuplicatedTransition("a", 0)


def test_same_transition_twice():
    dfa = (
        DFABuilder()
        .add_start(0)
        .add_final(1)
        .add_transition("a", 0, 1)
        .add_transition("a", 0, 1)
        .finalize()
    )
    assert dfa.test("a")
    assert len(dfa.transitions) == 1


def test_nfa_accepts_what_dfa_accepts():
    triples = [("a", 0, 1), ("b", 1, 2), ("c", 2, 0), ("b", 0, 2)]
    dfa = DFABuilder().add_start(0).add_final(0).add_transitions(triples).finalize()
    nfa = NFABuilder().add_start(0).add_final(0).add_transitions(triples).finalize()
    for string in ["", "abc", "bc", "abcbc", "ab", "cab", "bcabc", "aa"]:
        if dfa.test(string):
            assert nfa.test(string)
        assert nfa.test(string) == dfa.test(string)


def test_render():
    text = abc_plus().render()
    lines = text.splitlines()
    assert lines[0] == "START: 0"
    assert lines[1] == "FINALS:"
    assert lines[2] == "  0"
    assert lines[3] == "TRANSITIONS:"
    assert set(lines[4:]) == {"  (a,0) => 1", "  (b,1) => 2", "  (c,2) => 0"}
    assert str(abc_plus()) == text


def test_properties():
    dfa = abc_plus()
    assert dfa.start == 0
    assert dfa.final_states == frozenset([0])
    assert dfa.alphabet == frozenset("abc")
    assert dfa.states == frozenset([0, 1, 2])
    assert len(dfa) == 3
    assert dfa.is_final(0)
    assert not dfa.is_final(1)


def test_equality():
    assert abc_plus() == abc_plus()
    other = DFABuilder().add_start(0).add_final(0).add_transition("a", 0, 0).finalize()
    assert abc_plus() != other
