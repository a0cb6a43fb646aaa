import sys

from webhook_relay.app import main

sys.exit(main())
