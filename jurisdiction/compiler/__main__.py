import sys

from jurisdiction.compiler.cli import main

sys.exit(main())
