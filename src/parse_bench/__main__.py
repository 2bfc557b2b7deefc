import sys

from parse_bench.cli import main

sys.exit(main())
