"""Tests for logging context propagation."""

import threading

from hnhiring.logging.context import (
    clear_log_context,
    get_log_context,
    log_context,
    pop_log_context,
    push_log_context,
)


def test_empty_context():
    assert get_log_context() == {}


def test_push_and_pop():
    token = push_log_context(story_id=43243024, posting_id="101")
    assert get_log_context() == {"story_id": 43243024, "posting_id": "101"}

    pop_log_context(token)
    assert get_log_context() == {}


def test_nested_context():
    """Test nested context pushes and pops."""
    token1 = push_log_context(input="hits.json")
    token2 = push_log_context(story_id=43243024)
    token3 = push_log_context(posting_id="101")

    assert get_log_context() == {
        "input": "hits.json",
        "story_id": 43243024,
        "posting_id": "101",
    }

    pop_log_context(token3)
    assert get_log_context() == {"input": "hits.json", "story_id": 43243024}

    pop_log_context(token2)
    pop_log_context(token1)
    assert get_log_context() == {}


def test_context_override():
    """Pushing the same key shadows the previous value until popped."""
    token1 = push_log_context(posting_id="101")
    token2 = push_log_context(posting_id="102")
    assert get_log_context() == {"posting_id": "102"}

    pop_log_context(token2)
    assert get_log_context() == {"posting_id": "101"}

    pop_log_context(token1)


def test_context_manager_nested():
    with log_context(input="-"):
        with log_context(posting_id="101"):
            assert get_log_context() == {"input": "-", "posting_id": "101"}

        assert get_log_context() == {"input": "-"}

    assert get_log_context() == {}


def test_context_manager_exception():
    """Context is restored when the block raises."""
    try:
        with log_context(posting_id="101"):
            raise ValueError("Test exception")
    except ValueError:
        pass

    assert get_log_context() == {}


def test_context_manager_returns_itself():
    with log_context(posting_id="101") as ctx:
        assert ctx.kwargs == {"posting_id": "101"}


def test_clear_context():
    push_log_context(story_id=1, posting_id="101")

    clear_log_context()

    assert get_log_context() == {}


def test_context_isolation():
    """get_log_context returns a copy."""
    with log_context(posting_id="101"):
        context = get_log_context()
        context["story_id"] = 1

        assert get_log_context() == {"posting_id": "101"}


def test_threads_see_their_own_context():
    seen = {}

    def worker():
        with log_context(posting_id="thread"):
            seen["inside"] = get_log_context()

    with log_context(posting_id="main"):
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert get_log_context() == {"posting_id": "main"}

    assert seen["inside"] == {"posting_id": "thread"}
