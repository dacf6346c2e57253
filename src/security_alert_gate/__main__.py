import sys

from security_alert_gate.cli import main

sys.exit(main())
