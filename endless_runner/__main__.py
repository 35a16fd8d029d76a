import sys

from endless_runner.main import main

sys.exit(main())
