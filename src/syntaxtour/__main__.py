import sys

from syntaxtour import main

sys.exit(main())
