import sys

from commitsense.cli.main import main

sys.exit(main())
