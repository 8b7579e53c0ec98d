# Copyright 2016 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.

"""Builders for the three kinds of automata.

A builder accumulates a starting state, final states and transitions, then
``finalize()`` checks the structural invariants and returns an immutable
automaton. Every builder method returns the builder itself so calls can be
chained::

    dfa = (
        DFABuilder()
        .add_start(0)
        .add_final(0)
        .add_transition("a", 0, 1)
        .add_transition("b", 1, 2)
        .add_transition("c", 2, 0)
        .finalize()
    )

An error found in the middle of a chain (a duplicated DFA transition) is
kept by the builder. Every later call is then a no-op, and ``finalize()``
raises the first error, so a chain only needs to be checked once at the end.
"""

from functools import wraps

from loguru import logger

from automaton.errors import (
    AutomatonError,
    MissingFinalStates,
    MissingStartingState,
)
from automaton.fsa import DFA, ENFA, NFA
from automaton.transitions import DFATransitions, ENFATransitions, NFATransitions


def _check_state(state):
    if isinstance(state, bool) or not isinstance(state, int):
        raise TypeError(f"State must be an int, not {type(state).__name__}")
    if state < 0:
        raise ValueError(f"State must be non-negative, got {state}")
    return state


def _check_symbol(symbol):
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ValueError(f"Symbol must be a single character, got {symbol!r}")
    return symbol


def _chained(method):
    # Turns a method into a no-op returning the builder once an error is
    # pending, and records AutomatonErrors raised by the method.
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        if self._error is not None:
            return self
        try:
            method(self, *args, **kwargs)
        except AutomatonError as e:
            logger.debug("{} recorded {!r}", type(self).__name__, e)
            self._error = e
        return self

    return wrapper


class Builder:
    """
    Base class for automaton builders.

    Subclasses set ``transitions_class`` and ``automaton_class``.

    Attributes:
        start (int or None): The starting state, None until declared.
        final_states (set): The final states declared so far.
        transitions: The transition table being filled.
    """

    transitions_class = None
    automaton_class = None

    def __init__(self):
        self.start = None
        self.final_states = set()
        self.transitions = self.transitions_class()
        self._error = None

    def __repr__(self):
        return (
            f"<{type(self).__name__} start={self.start} "
            f"finals={sorted(self.final_states)} error={self._error!r}>"
        )

    @property
    def error(self):
        """
        The first error recorded by a chained call, or None.
        """
        return self._error

    @property
    def failed(self):
        return self._error is not None

    @_chained
    def add_start(self, state):
        """
        Sets the starting state, replacing any previous one.
        """
        _check_state(state)
        if self.start is not None and self.start != state:
            logger.warning("Starting state {} replaced by {}", self.start, state)
        self.start = state

    @_chained
    def add_final(self, state):
        """
        Adds a final state. Adding the same state twice has no effect.
        """
        self.final_states.add(_check_state(state))

    @_chained
    def add_transition(self, symbol, src, dest):
        """
        Adds a transition from ``src`` to ``dest`` labelled with ``symbol``.
        """
        self.transitions.add(
            _check_symbol(symbol), _check_state(src), _check_state(dest)
        )

    def add_finals(self, states):
        for state in states:
            self.add_final(state)
        return self

    def add_transitions(self, triples):
        """
        Adds every ``(symbol, src, dest)`` triple of the given iterable.
        """
        for symbol, src, dest in triples:
            self.add_transition(symbol, src, dest)
        return self

    def finalize(self):
        """
        Checks the automaton and returns it.

        Returns:
            FSA: An immutable automaton of ``automaton_class``.

        Raises:
            AutomatonError: The first error recorded by a chained call.
            MissingStartingState: If no starting state was declared.
            MissingFinalStates: If no final state was declared.
        """
        if self._error is not None:
            raise self._error
        if self.start is None:
            raise MissingStartingState()
        if not self.final_states:
            raise MissingFinalStates()

        logger.debug(
            "Finalized {} with {} transition keys",
            self.automaton_class.__name__,
            len(self.transitions),
        )
        return self.automaton_class(
            self.start, frozenset(self.final_states), self.transitions.freeze()
        )


class DFABuilder(Builder):
    """
    Builds a :class:`~automaton.fsa.DFA`.

    Binding a ``(symbol, src)`` pair to a second, different destination
    records :class:`~automaton.errors.DuplicatedTransition`, which is raised
    by ``finalize()``. Repeating a transition exactly is allowed.

    Example:
        >>> builder = DFABuilder().add_start(0).add_final(1)
        >>> builder.add_transition("a", 0, 1).add_transition("a", 0, 2).error
        DuplicatedTransition('a', 0)
    """

    transitions_class = DFATransitions
    automaton_class = DFA


class NFABuilder(Builder):
    """
    Builds a :class:`~automaton.fsa.NFA`. Transitions never conflict.
    """

    transitions_class = NFATransitions
    automaton_class = NFA


class ENFABuilder(NFABuilder):
    """
    Builds an :class:`~automaton.fsa.ENFA`, an NFA that also accepts epsilon
    transitions.
    """

    transitions_class = ENFATransitions
    automaton_class = ENFA

    @_chained
    def add_epsilon_transition(self, src, dest):
        """
        Adds a move from ``src`` to ``dest`` that consumes no symbol.
        """
        self.transitions.add_epsilon(_check_state(src), _check_state(dest))


BUILDERS = {
    "dfa": DFABuilder,
    "nfa": NFABuilder,
    "enfa": ENFABuilder,
}
