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

from cached_property import cached_property

from automaton.simulation import epsilon_closure, run_dfa, run_nfa

# Base class


class FSA:
    """
    Finite State Automaton (FSA) base class.

    Instances are created by the builders in :mod:`automaton.builder` and are
    never changed afterwards. States are non-negative integers and labels are
    single characters.

    Attributes:
        start (int): The starting state.
        final_states (frozenset): The final states, never empty.
        transitions: The frozen transition table.

    Methods:
        test(string): Checks if a string is accepted by the automaton.
        render(): Returns a human-readable dump of the automaton.
    """

    kind = None

    def __init__(self, start, final_states, transitions):
        self._start = start
        self._final_states = frozenset(final_states)
        self._transitions = transitions

    @property
    def start(self):
        return self._start

    @property
    def final_states(self):
        return self._final_states

    @property
    def transitions(self):
        return self._transitions

    @cached_property
    def alphabet(self):
        """
        The set of symbols labelling at least one transition.
        """
        return frozenset(self._transitions.labels())

    @cached_property
    def states(self):
        """
        Every state referenced by the start declaration, the final states
        or a transition endpoint.
        """
        stateset = self._transitions.states()
        stateset.add(self._start)
        stateset.update(self._final_states)
        return frozenset(stateset)

    def __len__(self):
        return len(self.states)

    def __eq__(self, other):
        if type(self) is not type(other):
            return False
        return (
            self._start == other._start
            and self._final_states == other._final_states
            and self._transitions == other._transitions
        )

    def __hash__(self):
        return hash((self.kind, self._start, self._final_states))

    def __repr__(self):
        return (
            f"<{type(self).__name__} start={self._start} "
            f"finals={sorted(self._final_states)} "
            f"transitions={len(self._transitions)}>"
        )

    def __str__(self):
        return self.render()

    def is_final(self, state):
        return state in self._final_states

    def test(self, string):
        """
        Checks if a given string is accepted by the automaton.

        Args:
            string (str): The input. Any iterable of single characters works.

        Returns:
            bool: True if the string is accepted, False otherwise. Symbols
            that label no transition make the string rejected, they never
            raise.
        """
        raise NotImplementedError

    accept = test

    def render(self):
        """
        Returns a textual representation of the automaton.

        The output lists the starting state, the final states and the
        transitions, each section in sorted order.

        Example:
            >>> print(dfa.render())
            START: 0
            FINALS:
              0
            TRANSITIONS:
              (a,0) => 1
              (b,1) => 0
        """
        lines = [f"START: {self._start}", "FINALS:"]
        lines.extend(f"  {state}" for state in sorted(self._final_states))
        lines.append("TRANSITIONS:")
        lines.extend(self._render_transitions())
        return "\n".join(lines) + "\n"

    def _render_transitions(self):
        raise NotImplementedError


def _sorted_items(items):
    return sorted(items, key=lambda item: (item[0][1], item[0][0]))


def _render_set(states):
    return "{" + ", ".join(str(s) for s in sorted(states)) + "}"


# Implementations


class DFA(FSA):
    """
    Deterministic Finite Automaton.

    Each ``(symbol, state)`` pair leads to at most one state. A missing
    transition sends the automaton to an implicit dead state that rejects
    the rest of the input.

    Example:
        >>> dfa = (DFABuilder().add_start(0).add_final(0)
        ...        .add_transition("a", 0, 1)
        ...        .add_transition("b", 1, 0)
        ...        .finalize())
        >>> dfa.test("abab")
        True
        >>> dfa.test("aba")
        False
    """

    kind = "dfa"

    def next_state(self, state, label):
        """
        Returns the state reached from ``state`` with ``label``, or None.
        """
        return self._transitions.get(label, state)

    def test(self, string):
        return run_dfa(self._transitions, self._start, self._final_states, string)

    accept = test

    def _render_transitions(self):
        for (symbol, src), dest in _sorted_items(self._transitions.items()):
            yield f"  ({symbol},{src}) => {dest}"


class NFA(FSA):
    """
    Nondeterministic Finite Automaton without epsilon moves.

    Each ``(symbol, state)`` pair leads to a set of states. The automaton is
    simulated by tracking every state it could be in; the input is accepted
    if one of them is final once the input is consumed.
    """

    kind = "nfa"

    def next_state(self, states, label):
        """
        Returns the frozenset of states reachable from any of ``states``
        with ``label``.
        """
        dests = set()
        for state in states:
            dests.update(self._transitions.get(label, state))
        return frozenset(dests)

    def test(self, string):
        return run_nfa(self._transitions, self._start, self._final_states, string)

    accept = test

    def _render_transitions(self):
        for (symbol, src), dests in _sorted_items(self._transitions.items()):
            yield f"  ({symbol},{src}) => {_render_set(dests)}"


class ENFA(NFA):
    """
    Nondeterministic Finite Automaton with epsilon moves.

    Before the first symbol and after every symbol, the set of current
    states is replaced by its epsilon closure, so an input can also reach a
    final state through trailing epsilon moves.

    Example:
        >>> enfa = (ENFABuilder().add_start(0).add_final(1)
        ...         .add_epsilon_transition(0, 1)
        ...         .finalize())
        >>> enfa.test("")
        True
    """

    kind = "enfa"

    def epsilon_closure(self, states):
        """
        Returns the states reachable from ``states`` using only epsilon
        moves, including ``states`` themselves.

        Args:
            states (iterable): The states to close.

        Returns:
            frozenset: The closed set. Closing it again returns the same set.
        """
        return epsilon_closure(self._transitions.epsilon_get, states)

    def next_state(self, states, label):
        return self.epsilon_closure(super().next_state(states, label))

    def test(self, string):
        return run_nfa(
            self._transitions,
            self._start,
            self._final_states,
            string,
            closure=self.epsilon_closure,
        )

    accept = test

    def _render_transitions(self):
        yield from super()._render_transitions()
        for src, dests in sorted(self._transitions.epsilon_items()):
            yield f"  {src} => {_render_set(dests)}"
