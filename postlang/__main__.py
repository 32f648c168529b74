import sys

from postlang.cli.main import main

sys.exit(main())
