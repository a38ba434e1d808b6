import sys
from polyscan.main import main

sys.exit(main())
