import sys

from markov_writer.cli import main

sys.exit(main())
