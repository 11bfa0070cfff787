from __future__ import annotations

import threading

from formkit_gov.utils import (
    create_error_messages,
    debounce,
    deep_clone,
    format_file_size,
    is_empty,
    remove_empty_values,
)


def test_create_error_messages_merges_overrides() -> None:
    messages = create_error_messages({"required": "Please answer"})

    assert messages["required"] == "Please answer"
    assert messages["invalidEmail"] == "Enter a valid email address"
    assert create_error_messages()["required"] == "This field is required"


def test_deep_clone_is_independent() -> None:
    original = {"address": {"city": "Austin"}, "files": [1, 2]}
    clone = deep_clone(original)

    clone["address"]["city"] = "Dallas"
    clone["files"].append(3)

    assert original == {"address": {"city": "Austin"}, "files": [1, 2]}


def test_is_empty() -> None:
    assert is_empty(None) is True
    assert is_empty("   ") is True
    assert is_empty([]) is True
    assert is_empty({}) is True
    assert is_empty(0) is False
    assert is_empty("x") is False


def test_remove_empty_values() -> None:
    values = {"first": "Jane", "middle": "", "suffix": None, "tags": [], "count": 0}
    assert remove_empty_values(values) == {"first": "Jane", "count": 0}


def test_format_file_size_is_reexported() -> None:
    assert format_file_size(1536) == "1.5 KB"


def test_debounce_runs_last_call_once() -> None:
    calls: list[str] = []
    done = threading.Event()

    @debounce(0.05)
    def save(value: str) -> None:
        calls.append(value)
        done.set()

    save("a")
    save("b")
    save("c")

    assert done.wait(2)
    assert calls == ["c"]
    assert save.pending is False


def test_debounce_flush_and_cancel() -> None:
    calls: list[str] = []

    @debounce(10)
    def save(value: str) -> None:
        calls.append(value)

    save("draft")
    assert save.pending is True
    save.flush()
    assert calls == ["draft"]

    save("discarded")
    save.cancel()
    save.flush()
    assert calls == ["draft"]
    assert save.__name__ == "save"


def test_helpers_are_exported_from_package_root() -> None:
    import formkit_gov

    for name in ("create_error_messages", "debounce", "deep_clone", "format_file_size", "is_empty"):
        assert name in formkit_gov.__all__
    assert formkit_gov.remove_empty_values is remove_empty_values
