import sys

from flick_games.cli import main

sys.exit(main())
