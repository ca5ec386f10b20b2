import sys

from canvascomponents.cli import main

sys.exit(main())
