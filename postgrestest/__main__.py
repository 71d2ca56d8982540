import sys

from postgrestest.cli import main

sys.exit(main())
