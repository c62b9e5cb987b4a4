import sys

from motifvec.run import main

sys.exit(main())
