#!/usr/bin/env python3
import sys

from netplan_check.orchestrator import main


if __name__ == "__main__":
    sys.exit(main())
