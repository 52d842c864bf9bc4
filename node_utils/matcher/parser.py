"""
Matcher expression parser (Lark).

Turns a comma-separated expression into a matcher accepted by the query
helpers and the nesting tracker, i.e. the inverse of ``stringify()``:

- bare type names: ``brace``, ``brace.open``       -> ``str``
- globs containing ``*``, ``?`` or ``[``: ``brace.*`` -> ``re.Pattern``
- slash-delimited regexes: ``/\\.open$/``           -> ``re.Pattern``
- two or more items                                 -> ``tuple`` (OR)

Whitespace around items is insignificant. A ``/`` inside a regex is
written as ``\\/``.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import fnmatch
import re
from typing import Any, Union

from lark import Lark, Token, Transformer, UnexpectedInput
from lark.exceptions import VisitError

from ..core.exceptions import MatcherParseError
from ..node.guards import assert_type

ParsedMatcher = Union[str, "re.Pattern[str]", tuple]

_GRAMMAR = r"""
?start: matcher

matcher: item ("," item)*
item: REGEX | TYPE_NAME

REGEX: /\/(\\.|[^\/\\])+\//
TYPE_NAME: /[^\s,\/]+/

%import common.WS
%ignore WS
"""

_GLOB_CHARS = ("*", "?", "[")

_parser = Lark(_GRAMMAR, parser="lalr", start="start")


class _ToMatcher(Transformer):
    def REGEX(self, t: Token) -> "re.Pattern[str]":  # noqa: N802
        body = str(t)[1:-1].replace("\\/", "/")
        try:
            return re.compile(body)
        except re.error as e:
            raise MatcherParseError(f"Invalid regex /{body}/: {e}", expression=str(t)) from e

    def TYPE_NAME(self, t: Token) -> Union[str, "re.Pattern[str]"]:  # noqa: N802
        name = str(t)
        if any(ch in name for ch in _GLOB_CHARS):
            return re.compile(r"\A" + fnmatch.translate(name))
        return name

    def item(self, items: list[Any]) -> Any:
        return items[0]

    def matcher(self, items: list[Any]) -> ParsedMatcher:
        if len(items) == 1:
            return items[0]
        return tuple(items)


def parse_matcher(expression: str) -> ParsedMatcher:
    """
    Parse a matcher expression.

    Raises:
        InvalidArgumentError: If ``expression`` is not a string
        MatcherParseError: If the expression is malformed
    """
    assert_type(
        isinstance(expression, str), 'expected "expression" to be a string', "expression"
    )
    try:
        tree = _parser.parse(expression)
        return _ToMatcher().transform(tree)
    except UnexpectedInput as e:
        raise MatcherParseError(
            f"Invalid matcher expression: {e}", expression=expression
        ) from e
    except VisitError as e:
        if isinstance(e.orig_exc, MatcherParseError):
            raise e.orig_exc from e
        raise
