import sys

from silly_commit.cli.main import main

sys.exit(main())
