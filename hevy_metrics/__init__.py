"""
Hevy workout metrics package.

This package fetches workout data from the Hevy API and writes small
derived text files (an append-only workout log and a workout count
snapshot) to a local metrics directory.
"""

__version__ = "0.1.0"
