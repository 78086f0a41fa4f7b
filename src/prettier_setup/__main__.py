import sys

from prettier_setup.cli import main

sys.exit(main())
