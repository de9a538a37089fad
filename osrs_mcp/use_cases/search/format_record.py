"""
Split matched data file lines into identifier/value pairs.
"""

import re

from osrs_mcp.entities.records import FormattedRecord, MatchRecord

_WHITESPACE = re.compile(r"\s+")


def format_record(match: MatchRecord) -> FormattedRecord:
    """
    Decompose a matched line of the form ``"<id> <value...>"``.

    The line is split on every whitespace run. The first part becomes the id
    and the remaining parts, joined by single spaces, the value. Whitespace at
    either edge of the line yields an empty part there, so ``" 4151 whip"``
    has an empty id and ``"4151 "`` an empty value. Lines with fewer than two
    parts pass through without id, value or formatted text.

    Args:
        match: Matched line

    Returns:
        FormattedRecord for the line
    """
    parts = _WHITESPACE.split(match.line)
    if len(parts) >= 2:
        return FormattedRecord(
            match.line,
            match.line_number,
            record_id=parts[0],
            value=" ".join(parts[1:]),
        )
    return FormattedRecord(match.line, match.line_number)
