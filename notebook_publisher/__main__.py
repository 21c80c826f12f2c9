import sys

from notebook_publisher.cli import main

sys.exit(main())
