import sys

from gitai.cli.main import main

sys.exit(main())
