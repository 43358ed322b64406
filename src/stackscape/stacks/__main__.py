import sys

from stackscape.stacks.xpstacks import main

sys.exit(main())
