import sys

from chesstree.app import main

sys.exit(main())
