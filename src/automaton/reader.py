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

"""Reads automata from a simple line-oriented text format.

The format, for example for the automaton accepting ``(abc)*``::

    0           # starting state
    0           # final states, separated by whitespace
    a 0 1       # transitions: symbol, source state, destination state
    b 1 2
    c 2 0

Anything after a ``#`` is a comment. Blank lines are skipped, but line
numbers in error messages always refer to the physical lines of the input,
starting at 1. The epsilon-NFA reader also accepts two-element lines
``src dest`` as epsilon transitions.
"""

from loguru import logger

from automaton.builder import DFABuilder, ENFABuilder, NFABuilder
from automaton.errors import (
    AutomatonError,
    BuildError,
    IllformedTransition,
    IncompleteTransition,
    MissingFinalsLine,
    MissingStartLine,
    ParseError,
    ReaderIOError,
)


def _content_lines(lines):
    # Yields (line number, content) for every line that is not blank once
    # its comment is removed.
    for nline, line in enumerate(lines, 1):
        content = line.split("#", 1)[0].strip()
        if content:
            yield nline, content


def parse_state(token, nline):
    """
    Parses a state number found on line ``nline``.

    Raises:
        ParseError: If ``token`` is not a non-negative integer.
    """
    if not (token.isascii() and token.isdigit()):
        raise ParseError(nline, token)
    return int(token)


class Reader:
    """
    Base class for automaton readers.

    A reader turns the text format into calls on a fresh builder of
    ``builder_class`` and returns the finalized automaton. Subclasses only
    differ in the builder they drive and in the transition lines they
    accept.

    Example:
        >>> dfa = DFAReader.from_string("0\\n0\\na 0 1\\nb 1 0")
        >>> dfa.test("abab")
        True
    """

    builder_class = None

    @classmethod
    def from_string(cls, text):
        """
        Reads an automaton from a string.
        """
        return cls.from_lines(text.splitlines())

    @classmethod
    def from_file(cls, path):
        """
        Reads an automaton from the file at ``path``.

        Raises:
            ReaderIOError: If the file cannot be opened or read.
            ReaderError: If the contents are not a valid automaton.
        """
        try:
            with open(path, encoding="utf-8") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise ReaderIOError(path, e) from e
        kind = cls.builder_class.automaton_class.__name__
        logger.debug("Reading {} from {}", kind, path)
        return cls.from_lines(lines)

    @classmethod
    def from_lines(cls, lines):
        """
        Reads an automaton from an iterable of lines.

        Returns:
            FSA: The finalized automaton.

        Raises:
            ReaderError: The first problem found, with its line number.
        """
        return cls().read(lines)

    def read(self, lines):
        builder = self.builder_class()
        lines = _content_lines(lines)

        self.read_start(builder, next(lines, None))
        self.read_finals(builder, next(lines, None))
        count = 0
        for nline, content in lines:
            self.read_transition(builder, nline, content.split())
            self._check(builder, nline)
            count += 1

        logger.debug("Read {} transition lines", count)
        return self._finalize(builder)

    def read_start(self, builder, line):
        if line is None:
            raise MissingStartLine()
        nline, content = line
        builder.add_start(parse_state(content, nline))
        self._check(builder, nline)

    def read_finals(self, builder, line):
        if line is None:
            raise MissingFinalsLine()
        nline, content = line
        builder.add_finals(parse_state(token, nline) for token in content.split())
        self._check(builder, nline)

    def read_transition(self, builder, nline, tokens):
        """
        Reads a ``symbol src dest`` line, already split into tokens.
        """
        symbol = tokens[0]
        if len(symbol) != 1 or len(tokens) > 3:
            raise IllformedTransition(nline)
        if len(tokens) < 3:
            raise IncompleteTransition(nline)
        src = parse_state(tokens[1], nline)
        dest = parse_state(tokens[2], nline)
        builder.add_transition(symbol, src, dest)

    @staticmethod
    def _check(builder, nline):
        if builder.error is not None:
            raise BuildError(nline, builder.error) from builder.error

    @staticmethod
    def _finalize(builder):
        try:
            return builder.finalize()
        except AutomatonError as e:
            raise BuildError(0, e) from e


class DFAReader(Reader):
    builder_class = DFABuilder


class NFAReader(Reader):
    builder_class = NFABuilder


class ENFAReader(Reader):
    """
    Reader for epsilon-NFAs. A line with exactly two elements ``src dest``
    is an epsilon transition.
    """

    builder_class = ENFABuilder

    def read_transition(self, builder, nline, tokens):
        if len(tokens) != 2:
            return super().read_transition(builder, nline, tokens)
        src = parse_state(tokens[0], nline)
        dest = parse_state(tokens[1], nline)
        builder.add_epsilon_transition(src, dest)


READERS = {
    "dfa": DFAReader,
    "nfa": NFAReader,
    "enfa": ENFAReader,
}


def _reader_for(kind):
    try:
        return READERS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown automaton kind {kind!r}, expected one of {sorted(READERS)}"
        ) from None


def read_string(text, kind="dfa"):
    """
    Reads an automaton of the given kind (``"dfa"``, ``"nfa"`` or ``"enfa"``)
    from a string.
    """
    return _reader_for(kind).from_string(text)


def read_file(path, kind="dfa"):
    """
    Reads an automaton of the given kind (``"dfa"``, ``"nfa"`` or ``"enfa"``)
    from a file.
    """
    return _reader_for(kind).from_file(path)
