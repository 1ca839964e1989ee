"""
Output generation for scan results.
"""

from .report import SongTableResult, ScanReport

__all__ = ['SongTableResult', 'ScanReport']
