import sys

from exception_audit.main import main

sys.exit(main())
