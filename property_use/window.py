"""Temporal window calculation in block heights."""


def compute_window(current_height: int, duration: int) -> tuple[int, int]:
    """Return ``(start_block, end_block)`` for a request made at ``current_height``.

    ``duration`` is taken as given; callers decide whether to validate it.
    """
    return current_height, current_height + duration
