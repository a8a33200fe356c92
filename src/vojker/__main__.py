import sys

from vojker.cli import main

sys.exit(main())
