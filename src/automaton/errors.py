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

"""Exceptions raised while building automata and while reading automaton
files.

Core errors (subclasses of :class:`AutomatonError`) describe a violated
structural invariant of an automaton. Reader errors (subclasses of
:class:`ReaderError`) describe a problem in the text format and carry the
1-based line number where it was found.
"""

# Core exceptions


class AutomatonError(Exception):
    """
    Base class for errors raised while building an automaton.

    Two errors are equal when they have the same type and the same payload,
    so tests and callers can compare them directly.
    """

    def _key(self):
        return ()

    def __eq__(self, other):
        return type(self) is type(other) and self._key() == other._key()

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((type(self).__name__,) + self._key())


class MissingStartingState(AutomatonError):
    """
    Raised by ``finalize()`` when no starting state was ever declared.
    """

    def __init__(self):
        super().__init__("Missing starting state.")


class MissingFinalStates(AutomatonError):
    """
    Raised by ``finalize()`` when the set of final states is empty.
    """

    def __init__(self):
        super().__init__("Missing final states.")


class DuplicatedTransition(AutomatonError):
    """
    Raised when a deterministic automaton binds the same (symbol, source)
    pair to two different destination states.

    Attributes:
        symbol (str): The label of the conflicting transition.
        source (int): The source state of the conflicting transition.
    """

    def __init__(self, symbol, source):
        self.symbol = symbol
        self.source = source
        super().__init__(f"Duplicated transition ('{symbol}',{source}).")

    def _key(self):
        return (self.symbol, self.source)

    def __repr__(self):
        return f"{type(self).__name__}({self.symbol!r}, {self.source!r})"


# Reader exceptions


class ReaderError(Exception):
    """
    Base class for errors raised while reading the text representation of
    an automaton.

    Attributes:
        line (int): The 1-based number of the offending line, or 0 when the
            error is not attached to a particular line.
        message (str): Explanation of the error.
    """

    def __init__(self, message, line=0):
        self.line = line
        self.message = message
        if line:
            message = f"Line {line}: {message}"
        super().__init__(message)


class MissingStartLine(ReaderError):
    """
    The input is empty or only contains blank lines and comments.
    """

    def __init__(self):
        super().__init__("The file is empty or only contains white characters.")


class MissingFinalsLine(ReaderError):
    """
    The input does not contain the line listing the final states.
    """

    def __init__(self):
        super().__init__("The file does not specify the list of final states.")


class IncompleteTransition(ReaderError):
    """
    A transition line is missing its source or its destination state.
    """

    def __init__(self, line):
        super().__init__("missing the src or the dest state.", line)


class IllformedTransition(ReaderError):
    """
    A transition line has too many elements, or its symbol is longer than
    one character.
    """

    def __init__(self, line):
        super().__init__("too much elements.", line)


class ParseError(ReaderError):
    """
    A state on the given line is not a non-negative integer.

    Attributes:
        token (str): The text that could not be parsed.
    """

    def __init__(self, line, token):
        self.token = token
        super().__init__(f"parse error, {token!r} is not a state.", line)


class BuildError(ReaderError):
    """
    Wraps an :class:`AutomatonError` raised by the builder while the reader
    was processing a line. The wrapped error is also set as ``__cause__``.

    Attributes:
        error (AutomatonError): The core error.
    """

    def __init__(self, line, error):
        self.error = error
        super().__init__(f"{type(error).__name__}: {error}", line)


class ReaderIOError(ReaderError):
    """
    The automaton file could not be opened or read.
    """

    def __init__(self, path, error):
        self.path = path
        super().__init__(f"IO error on {path}: {error}")
