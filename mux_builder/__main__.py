import sys

from mux_builder.cli import main

sys.exit(main())
