import sys

from sharedparams.cli import main

sys.exit(main())
