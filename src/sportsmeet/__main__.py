import sys

from sportsmeet.cli import main

sys.exit(main())
