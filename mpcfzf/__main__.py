import sys

from mpcfzf.cli import main

sys.exit(main())
