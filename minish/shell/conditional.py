"""AND/OR chain evaluation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..exceptions import MinishError
from ..parser import ConditionalNode

if TYPE_CHECKING:
    from .core import Shell

logger = logging.getLogger(__name__)


def run_conditional(shell: "Shell", node: ConditionalNode) -> None:
    """Evaluate ``&&`` groups of ``||`` alternatives left to right.

    A group succeeds as soon as one alternative does. When every
    alternative of a group fails, the failure is raised only for the last
    group; an earlier failing group ends the chain as a success. This is
    not POSIX short-circuiting: ``false && echo A || echo B`` prints
    nothing and succeeds.
    """

    last = len(node.groups) - 1
    for index, group in enumerate(node.groups):
        failure: MinishError | None = None
        for alternative in group:
            try:
                shell.run(alternative)
            except MinishError as exc:
                failure = exc
                continue
            failure = None
            break
        if failure is None:
            continue
        if index == last:
            raise failure
        logger.debug("and-group %d failed (%s); chain stops without error", index, failure)
        return


__all__ = ["run_conditional"]
