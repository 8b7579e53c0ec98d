import sys

from automaton.cli import main

sys.exit(main())
