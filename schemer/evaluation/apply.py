from __future__ import annotations

import logging
from typing import Optional

from schemer import config
from schemer.errors import SchemerUnboundSymbol
from schemer.evaluation.primitives import PRIMITIVES
from schemer.types.values import Bool, LispVal

logger = logging.getLogger(__name__)


def apply(name: str, args: list[LispVal], strict: Optional[bool] = None) -> LispVal:
    """
    Apply the primitive called ``name`` to already-reduced arguments.

    A name missing from the table gives #f, or raises SchemerUnboundSymbol
    when strict (argument, or SCHEMER_STRICT_APPLY when not given).
    """
    fn = PRIMITIVES.get(name)
    if fn is None:
        if strict is None:
            strict = config.strict_apply()
        logger.debug("no primitive named %r (strict=%s)", name, strict)
        if strict:
            raise SchemerUnboundSymbol(f"Unrecognized primitive function: {name}")
        return Bool(False)
    result = fn(args)
    logger.debug("(%s %s) => %s", name, " ".join(str(a) for a in args), result)
    return result
