import sys

from beacon.app import main

sys.exit(main())
