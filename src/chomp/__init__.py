"""
Public API.
"""

from .core.result import ParseResult
from .core.stream import Stream, View
from .parser import (
    Delay, Parser, between, bind, discard, either, fmap, one_of,
    one_or_more, optional, pair_of, parse, run, sep_by, sequence_of,
    zero_or_more
)
from .primitive import Fail, Succeed, end, fail, literal, satisfy, succeed
from .types import Failure, Outcome, ParseError

__all__ = (
    "ParseResult", "Stream", "View",
    "Failure", "Outcome", "ParseError",

    "Fail", "Succeed", "end", "fail", "literal", "satisfy", "succeed",

    "Delay", "Parser", "between", "bind", "discard", "either", "fmap",
    "one_of", "one_or_more", "optional", "pair_of", "parse", "run", "sep_by",
    "sequence_of", "zero_or_more"
)

__version__ = "0.1.0"
