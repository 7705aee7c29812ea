import sys

from splash_client.cli.main import main

sys.exit(main())
