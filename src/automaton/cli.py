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

"""Command line front end.

Usage::

    automaton demo
    automaton [options] FILE WORD...

The first form builds a small DFA accepting ``(toto)*`` and prints how it
answers a few words. The second form reads an automaton file and prints
whether each WORD is accepted.
"""

import os
import sys
from optparse import OptionParser

from loguru import logger

from automaton.builder import DFABuilder
from automaton.errors import AutomatonError, ReaderError
from automaton.reader import READERS, read_file
from automaton.version import versionstring

LOG_LEVELS = ["WARNING", "INFO", "DEBUG", "TRACE"]
DEMO_WORDS = ["toto", "", "t", "to", "tot", "totot", "totototo"]


def _parser():
    p = OptionParser(
        usage="usage: %prog [options] FILE WORD...\n       %prog demo",
        version=f"%prog {versionstring()}",
    )
    p.add_option(
        "-k",
        "--kind",
        dest="kind",
        type="choice",
        choices=sorted(READERS),
        help="Kind of automaton in FILE: dfa, nfa or enfa (default: dfa)",
        default="dfa",
    )
    p.add_option(
        "-p",
        "--print",
        dest="render",
        action="store_true",
        help="Print the automaton before testing the words",
        default=False,
    )
    p.add_option(
        "-e",
        "--empty",
        dest="empty",
        action="store_true",
        help="Also test the empty word",
        default=False,
    )
    p.add_option(
        "-v",
        "--verbose",
        dest="verbose",
        action="count",
        help="Log more details to stderr, repeat for more",
        default=0,
    )
    return p


def configure_logging(verbose=0):
    """
    Sends the package's log messages to stderr.

    The level goes from WARNING up to TRACE with each ``-v``. The
    ``AUTOMATON_LOG_LEVEL`` environment variable, when set, wins.

    Raises:
        ValueError: If the level is not a loguru level name.
    """
    level = LOG_LEVELS[min(verbose, len(LOG_LEVELS) - 1)]
    level = os.environ.get("AUTOMATON_LOG_LEVEL", level).upper()
    logger.level(level)
    logger.remove()
    logger.add(sys.stderr, level=level, format="{level}: {message}")
    logger.enable("automaton")


def demo_automaton():
    # (toto)*
    return (
        DFABuilder()
        .add_start(0)
        .add_final(0)
        .add_transition("t", 0, 1)
        .add_transition("o", 1, 2)
        .add_transition("t", 2, 3)
        .add_transition("o", 3, 0)
        .finalize()
    )


def run_demo(out=None):
    out = out or sys.stdout
    dfa = demo_automaton()
    print(dfa.render(), end="", file=out)
    for word in DEMO_WORDS:
        print(f"{word!r}: {dfa.test(word)}", file=out)


def run_file(path, words, kind="dfa", render=False, out=None):
    out = out or sys.stdout
    fsa = read_file(path, kind)
    if render:
        print(fsa.render(), end="", file=out)
    for word in words:
        print(f"{word!r}: {fsa.test(word)}", file=out)


def main(argv=None, out=None):
    """
    Runs the command line interface.

    Returns:
        int: 0 on success, 1 if the automaton could not be read or built.
    """
    out = out or sys.stdout
    parser = _parser()
    options, args = parser.parse_args(argv)
    try:
        configure_logging(options.verbose)
    except ValueError as e:
        parser.error(f"AUTOMATON_LOG_LEVEL: {e}")

    if args == ["demo"]:
        run_demo(out)
        return 0
    if len(args) < 2 and not (args and options.empty):
        parser.error("expected FILE and at least one WORD")

    path, words = args[0], args[1:]
    if options.empty:
        words.insert(0, "")
    try:
        run_file(path, words, kind=options.kind, render=options.render, out=out)
    except (AutomatonError, ReaderError) as e:
        logger.debug("Failed to read {}: {!r}", path, e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
