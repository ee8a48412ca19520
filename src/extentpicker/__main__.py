import sys

from extentpicker.cli import main

sys.exit(main())
