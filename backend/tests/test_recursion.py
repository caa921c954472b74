import threading

import pytest

from entity_block.blocks.recursion import RecursionGuard, RenderContext


def test_guard_allows_up_to_limit():
    guard = RecursionGuard(limit=2)
    assert guard.enter("document:1:full") is True
    assert guard.enter("document:1:full") is True
    assert guard.enter("document:1:full") is False
    assert guard.count("document:1:full") == 3


def test_guard_counts_keys_independently():
    guard = RecursionGuard(limit=1)
    assert guard.enter("document:1:full") is True
    assert guard.enter("document:1:teaser") is True
    assert guard.enter("document:1:full") is False


def test_guard_reset():
    guard = RecursionGuard(limit=1)
    guard.enter("project:1:full")
    guard.reset()
    assert guard.count("project:1:full") == 0
    assert guard.enter("project:1:full") is True


def test_guard_rejects_nonpositive_limit():
    with pytest.raises(ValueError):
        RecursionGuard(limit=0)


def test_context_creates_its_own_guard():
    first = RenderContext()
    second = RenderContext()
    assert first.guard is not second.guard
    assert first.depth == 0
    assert first.viewer is None


def test_guard_counts_concurrent_entries():
    guard = RecursionGuard(limit=2)

    def render_many():
        for _ in range(200):
            guard.enter("document:1:full")
            guard.count("document:1:full")

    threads = [threading.Thread(target=render_many) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert guard.count("document:1:full") == 1600
