import sys

from torrentproc.cli import main

sys.exit(main())
