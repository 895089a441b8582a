# SPDX-License-Identifier: Apache-2.0
import sys

from rwplot.cli import main

sys.exit(main())
