import sys

from grid_quest.main import main

sys.exit(main())
