"""
Utility functions and classes.
"""

from .pattern_search import loose_compare, loose_search, hex_to_bytes
from .string_utils import to_camel_case, to_snake_case, format_offset

__all__ = ['loose_compare', 'loose_search', 'hex_to_bytes', 'to_camel_case', 'to_snake_case',
           'format_offset']
