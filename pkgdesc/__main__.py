# SPDX-License-Identifier: MIT
import sys

from pkgdesc.cli import main

sys.exit(main())
