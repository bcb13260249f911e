import sys

from wordpass.cli import main

sys.exit(main())
