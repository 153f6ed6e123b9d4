import sys

from eolapi.cli import main

sys.exit(main())
