# build_report_service/core/stripping/reason_walker.py
"""
Reason walking

StrippingInfo answers one hop at a time. These helpers walk outward from an
entity for reporting tools, guarding against cycles in the recorded graph.
"""

from collections import deque
from dataclasses import dataclass

from build_report_service.core.stripping.stripping_info import StrippingInfo


@dataclass(frozen=True)
class ReasonStep:
    entity: str
    reason: str
    depth: int  # 1 for direct reasons of the start entity


def walk_reasons(
    info: StrippingInfo, entity: str, max_depth: int | None = None
) -> list[ReasonStep]:
    """
    Breadth-first walk from `entity` over "included because of" edges.

    Every edge reachable from `entity` is returned once. Each entity is
    expanded at most once, so cyclic graphs terminate.
    """
    steps: list[ReasonStep] = []
    expanded: set[str] = {entity}
    queue = deque([(entity, 0)])

    while queue:
        current, depth = queue.popleft()
        if max_depth is not None and depth >= max_depth:
            continue
        for reason in sorted(info.get_reasons_for_including(current)):
            steps.append(ReasonStep(entity=current, reason=reason, depth=depth + 1))
            if reason not in expanded:
                expanded.add(reason)
                queue.append((reason, depth + 1))

    return steps


def reason_chains(
    info: StrippingInfo,
    entity: str,
    max_depth: int | None = None,
    max_chains: int | None = None,
) -> list[list[str]]:
    """
    Return acyclic paths from `entity` to a root cause, i.e. an entity with
    no recorded reasons. A path that would revisit an entity is cut at that
    point and still reported, as is a path that reaches `max_depth` hops.
    At most `max_chains` paths are returned when it is given.
    """
    chains: list[list[str]] = []
    stack = [([entity], False)]  # (path, cut short by a cycle)

    while stack:
        if max_chains is not None and len(chains) >= max_chains:
            break
        path, cycled = stack.pop()
        if cycled:
            chains.append(path)
            continue
        reasons = sorted(info.get_reasons_for_including(path[-1]))
        if not reasons or (max_depth is not None and len(path) > max_depth):
            chains.append(path)
            continue
        # Reversed so paths come out in sorted order
        for reason in reversed(reasons):
            stack.append((path + [reason], reason in path))

    return chains
