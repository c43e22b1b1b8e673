import sys

from convex_hull.cli import main

sys.exit(main())
