"""Deep merging of nested containers.

Both reducers fold their arguments left to right. Later values win, except
where the value merged so far and the incoming one are both containers, in
which case they are merged key by key. `deep_extend` does that for every
pair of containers, so two lists are spliced together position by position.
`deep_extend_distinct` only merges when both sides are associative and
otherwise lets the incoming container replace the old one, at the top level
as well as below it. Empty arguments are skipped at the top level; below it
an empty container is indexed and so replaces the value under its key.
"""
from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Callable, Dict

from .containers import Container, is_associative, is_container, iter_items, require_container

logger = logging.getLogger(__name__)

ShouldMerge = Callable[[Container, Container], bool]


def _merge_pair(current: Container, incoming: Container, should_merge: ShouldMerge) -> Container:
    # current is owned by the reduction, never one of the inputs.
    result: Dict[Any, Any] = dict(iter_items(current))
    for key, value in iter_items(incoming):
        existing = result.get(key)
        if (
            key in result
            and is_container(existing)
            and is_container(value)
            and should_merge(existing, value)
        ):
            result[key] = _merge_pair(existing, value, should_merge)
        else:
            result[key] = deepcopy(value)

    if isinstance(current, list) and isinstance(incoming, list):
        # Both sides had the keys 0..n-1, so result does too.
        return list(result.values())
    return result


def _reduce(containers, should_merge: ShouldMerge, operation: str) -> Container:
    for container in containers:
        require_container(container, operation)

    if not containers:
        return {}

    merged = deepcopy(containers[0])
    for container in containers[1:]:
        if not container:
            # An empty layer has no keys to contribute.
            continue
        if should_merge(merged, container):
            merged = _merge_pair(merged, container, should_merge)
        else:
            merged = deepcopy(container)

    logger.debug("%s folded %d containers", operation, len(containers))
    return merged


def _always(current: Container, incoming: Container) -> bool:
    return True


def _both_associative(current: Container, incoming: Container) -> bool:
    return is_associative(current) and is_associative(incoming)


def deep_extend(*containers: Container) -> Container:
    """Deep-merge containers, later ones winning on conflicting keys.

    >>> deep_extend({0: 'foo', 1: 'bar'}, {0: 'yolo'})
    {0: 'yolo', 1: 'bar'}
    """
    return _reduce(containers, _always, "extend")


def deep_extend_distinct(*containers: Container) -> Container:
    """Deep-merge like deep_extend, but replace list-shaped values wholesale.

    >>> deep_extend_distinct({0: 'foo', 1: 'bar'}, {0: 'yolo'})
    {0: 'yolo'}
    """
    return _reduce(containers, _both_associative, "extend_distinct")
