"""JSONL aggregation: one independent document per non-blank line."""

from __future__ import annotations

import logging
from typing import Optional

from fauxson.document import parse_document
from fauxson.schemas import ParseOutcome, ParserConfig

logger = logging.getLogger(__name__)


def parse_jsonl(text: str, config: Optional[ParserConfig] = None) -> ParseOutcome:
    """Parse every non-blank line of ``text`` and fold the results.

    ``data`` lists the data of lines that succeeded. ``valid`` requires at
    least one successful line and every line valid. ``reason`` joins the
    non-empty per-line reasons with newlines.

    Args:
        text: Newline-delimited input.
        config: Parser options applied to each line.

    Returns:
        A fresh aggregate ParseOutcome.
    """
    aggregate = ParseOutcome()
    data = []
    all_valid = True

    for line_number, line in enumerate(text.split("\n"), start=1):
        if not line.strip():
            continue
        line_outcome = parse_document(line, config)
        aggregate.lines.append(line_outcome)
        aggregate.error_codes.extend(line_outcome.error_codes)

        if line_outcome.success:
            data.append(line_outcome.data)
            all_valid = all_valid and line_outcome.valid
        else:
            all_valid = False
            logger.debug("JSONL line %d failed: %s", line_number, line_outcome.reason)

        if line_outcome.reason:
            aggregate.reasons.append(line_outcome.reason)

    aggregate.success = len(data) > 0
    aggregate.data = data if aggregate.success else None
    aggregate.valid = all_valid and aggregate.success
    aggregate.reason = "\n".join(aggregate.reasons)
    return aggregate


__all__ = ["parse_jsonl"]
