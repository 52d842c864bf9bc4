"""
Matcher expressions for type queries.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from ..core.exceptions import MatcherParseError
from .parser import parse_matcher

__all__ = [
    "MatcherParseError",
    "parse_matcher",
]
