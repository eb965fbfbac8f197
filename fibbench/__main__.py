import sys

from fibbench.runner import main

sys.exit(main())
