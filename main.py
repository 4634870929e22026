#!/usr/bin/env python3
"""
Main script for running task-time analysis.
"""

# Pipeline overview (README-style):
# 1) Read one duration in seconds per line from a file or stdin.
# 2) Keep lines with a finite, strictly positive leading number; drop the rest.
# 3) Log-transform, take the mean and Bessel-corrected SD of the logs, and
#    build a Student's t interval with the tabulated critical value.
# 4) Exponentiate back to seconds and report geometric mean, interval and the
#    arithmetic mean for comparison.

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from taskci.cli import main

if __name__ == "__main__":
    sys.exit(main())
