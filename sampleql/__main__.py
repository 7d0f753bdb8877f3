import sys

from sampleql.cli import main

sys.exit(main())
