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

from types import MappingProxyType

from automaton.errors import DuplicatedTransition

EMPTY = frozenset()


class DFATransitions:
    """
    Transition table of a deterministic automaton.

    The table maps a ``(symbol, source)`` pair to a single destination state.
    A pair can only be bound once: binding it again to another destination
    raises :class:`~automaton.errors.DuplicatedTransition`, while binding it
    again to the same destination is a no-op.

    Example:
        >>> table = DFATransitions()
        >>> table.add("a", 0, 1)
        >>> table.get("a", 0)
        1
        >>> table.get("b", 0) is None
        True
    """

    def __init__(self):
        self.table = {}

    def __len__(self):
        return len(self.table)

    def __contains__(self, key):
        return key in self.table

    def __eq__(self, other):
        return type(self) is type(other) and self.table == other.table

    def add(self, symbol, src, dest):
        """
        Binds ``(symbol, src)`` to ``dest``.

        Raises:
            DuplicatedTransition: If the pair is already bound to a different
                destination state.
        """
        key = (symbol, src)
        current = self.table.get(key)
        if current is not None and current != dest:
            raise DuplicatedTransition(symbol, src)
        self.table[key] = dest

    def get(self, symbol, state):
        return self.table.get((symbol, state))

    def items(self):
        return self.table.items()

    def triples(self):
        for (symbol, src), dest in self.table.items():
            yield src, symbol, dest

    def labels(self):
        return {symbol for symbol, _ in self.table}

    def states(self):
        stateset = {src for _, src in self.table}
        stateset.update(self.table.values())
        return stateset

    def freeze(self):
        """
        Returns a copy of this table whose mapping can no longer be changed.
        """
        frozen = DFATransitions()
        frozen.table = MappingProxyType(dict(self.table))
        return frozen


class NFATransitions:
    """
    Transition table of a nondeterministic automaton.

    The table maps a ``(symbol, source)`` pair to a set of destination
    states. Adding a transition is a set union, so it never fails and adding
    the same transition twice has no effect.
    """

    def __init__(self):
        self.table = {}

    def __len__(self):
        return len(self.table)

    def __contains__(self, key):
        return key in self.table

    def __eq__(self, other):
        return type(self) is type(other) and self.table == other.table

    def add(self, symbol, src, dest):
        self.table.setdefault((symbol, src), set()).add(dest)

    def get(self, symbol, state):
        """
        Returns the destinations of ``(symbol, state)``, or an empty
        frozenset if there is no such transition.
        """
        return self.table.get((symbol, state), EMPTY)

    def items(self):
        return self.table.items()

    def triples(self):
        for (symbol, src), dests in self.table.items():
            for dest in dests:
                yield src, symbol, dest

    def labels(self):
        return {symbol for symbol, _ in self.table}

    def states(self):
        stateset = {src for _, src in self.table}
        for dests in self.table.values():
            stateset.update(dests)
        return stateset

    def _frozen_table(self):
        return MappingProxyType(
            {key: frozenset(dests) for key, dests in self.table.items()}
        )

    def freeze(self):
        frozen = type(self)()
        frozen.table = self._frozen_table()
        return frozen


class ENFATransitions(NFATransitions):
    """
    Transition table of a nondeterministic automaton with epsilon moves.

    In addition to the labelled table inherited from :class:`NFATransitions`,
    it keeps a separate map from a source state to the set of states reachable
    from it without consuming a symbol.
    """

    def __init__(self):
        super().__init__()
        self.epsilons = {}

    def __eq__(self, other):
        return super().__eq__(other) and self.epsilons == other.epsilons

    def add_epsilon(self, src, dest):
        self.epsilons.setdefault(src, set()).add(dest)

    def epsilon_get(self, state):
        return self.epsilons.get(state, EMPTY)

    def epsilon_items(self):
        return self.epsilons.items()

    def states(self):
        stateset = super().states()
        stateset.update(self.epsilons)
        for dests in self.epsilons.values():
            stateset.update(dests)
        return stateset

    def freeze(self):
        frozen = ENFATransitions()
        frozen.table = self._frozen_table()
        frozen.epsilons = MappingProxyType(
            {src: frozenset(dests) for src, dests in self.epsilons.items()}
        )
        return frozen
