from __future__ import annotations

import logging
from typing import Optional

from schemer import config
from schemer.errors import SchemerParseError
from schemer.evaluation.evaluator import evaluate as evaluate_value
from schemer.printer import show_val
from schemer.reader.parser import parse

logger = logging.getLogger(__name__)


def read_expr(
    source: str,
    evaluate: Optional[bool] = None,
    strict: Optional[bool] = None,
) -> str:
    """
    Read one expression from the start of ``source`` and render it as text.

    When ``evaluate`` is on (the default, see SCHEMER_EVALUATE) the value is
    reduced first. A parse failure is returned as text starting with
    "No match: "; errors raised while reducing propagate.
    """
    if evaluate is None:
        evaluate = config.evaluate_by_default()
    try:
        val = parse(source)
    except SchemerParseError as err:
        logger.debug("no match for %r", source)
        return config.FAILURE_MARKER + str(err)
    if evaluate:
        val = evaluate_value(val, strict)
    return show_val(val)
