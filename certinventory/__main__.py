# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Main entry point for running certinventory as a module.

Allows running:
    python -m certinventory list --certificates certificates.json
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
