import sys

from order_placement.main import main

sys.exit(main())
