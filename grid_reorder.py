from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")

NOT_FOUND = -1


class ReorderError(ValueError):
    pass


def resolve_indexes(items: Sequence[T], ids, key: Callable[[T], str]) -> List[int]:
    """Map ids to positions in items; ids that are missing resolve to NOT_FOUND."""
    positions = {}
    for idx, item in enumerate(items):
        positions.setdefault(key(item), idx)
    return [positions.get(item_id, NOT_FOUND) for item_id in ids]


def reorder_items(sequence: Sequence[T], source_indexes: Sequence[int], target_index: int) -> List[T]:
    """Move the items at source_indexes to target_index as one contiguous block.

    Moved items keep the order in which source_indexes lists them, not their
    positional order. target_index addresses the sequence after the moved items
    have been taken out; anything past the end appends.
    """
    total = len(sequence)
    seen = set()
    for idx in source_indexes:
        if idx < 0 or idx >= total:
            raise ReorderError(f"Source index {idx} out of range for {total} items")
        if idx in seen:
            raise ReorderError(f"Duplicate source index {idx}")
        seen.add(idx)
    if target_index < 0:
        raise ReorderError(f"Target index {target_index} is negative")

    moving = [sequence[idx] for idx in source_indexes]
    result = list(sequence)
    for idx in sorted(source_indexes, reverse=True):
        del result[idx]

    insert_at = min(target_index, len(result))
    return result[:insert_at] + moving + result[insert_at:]
