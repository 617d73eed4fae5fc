import sys

from nameparts.cli import main

sys.exit(main())
