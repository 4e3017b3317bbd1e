import sys

from emtmad.cli import main

sys.exit(main())
