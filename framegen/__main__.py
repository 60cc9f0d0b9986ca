import sys

from framegen.cli.framegen import main

sys.exit(main())
