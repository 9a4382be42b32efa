#!/usr/bin/env python
"""
Hevy metrics CLI runner.

Usage:
    python run.py last-workout  # append latest workout to .metrics/workouts_data.txt
    python run.py count         # save workout count to .metrics/workouts_count.txt
"""

import sys
from pathlib import Path

# add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from hevy_metrics.main import main

if __name__ == "__main__":
    main()
