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

"""Membership test algorithms shared by the automaton classes.

The functions in this module are pure: they only read the transition table
they are given and allocate per-call working sets, so a finalized automaton
can be tested from several threads at once.
"""

from loguru import logger


def run_dfa(transitions, start, finals, symbols):
    """
    Runs a deterministic automaton over ``symbols``.

    The current state starts at ``start``. Each symbol moves it along the
    matching transition. A missing transition leaves the machine without a
    current state (a dead sink) for the rest of the input.

    Args:
        transitions (DFATransitions): The transition table.
        start (int): The starting state.
        finals (frozenset): The final states.
        symbols (iterable): The input symbols.

    Returns:
        bool: True if the machine stops in a final state.
    """
    state = start
    for symbol in symbols:
        logger.trace("{!r} -> {!r} ->", state, symbol)
        state = transitions.get(symbol, state)
        if state is None:
            return False
    return state in finals


def epsilon_closure(epsilon_get, states):
    """
    Returns the smallest superset of ``states`` closed under epsilon moves.

    Args:
        epsilon_get (callable): Maps a state to the frozenset of states
            reachable from it by one epsilon move.
        states (iterable): The states to close.

    Returns:
        frozenset: The closed set of states.

    Example:
        >>> edges = {0: frozenset([1]), 1: frozenset([0, 2])}
        >>> sorted(epsilon_closure(lambda s: edges.get(s, frozenset()), [0]))
        [0, 1, 2]
    """
    closure = set(states)
    frontier = list(closure)
    while frontier:
        state = frontier.pop()
        for dest in epsilon_get(state):
            if dest not in closure:
                closure.add(dest)
                frontier.append(dest)
    return frozenset(closure)


def next_states(transitions, states, symbol):
    """
    Returns the union of the destinations of ``symbol`` from every state in
    ``states``.
    """
    dests = set()
    for state in states:
        dests.update(transitions.get(symbol, state))
    return dests


def run_nfa(transitions, start, finals, symbols, closure=None):
    """
    Runs a nondeterministic automaton over ``symbols`` by tracking the set of
    all states it could be in.

    Args:
        transitions (NFATransitions): The transition table.
        start (int): The starting state.
        finals (frozenset): The final states.
        symbols (iterable): The input symbols.
        closure (callable, optional): Applied to the current set before the
            first symbol and after each symbol. Used for epsilon moves.

    Returns:
        bool: True if the final set of current states contains a final state.
    """
    states = {start}
    if closure is not None:
        states = closure(states)
    for symbol in symbols:
        logger.trace("{} -> {!r} ->", sorted(states), symbol)
        states = next_states(transitions, states, symbol)
        if not states:
            return False
        if closure is not None:
            states = closure(states)
    return not finals.isdisjoint(states)
