import sys

from rift.main import main

sys.exit(main())
