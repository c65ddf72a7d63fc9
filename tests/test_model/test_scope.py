"""Tests for the scope stack."""

import pytest

from icss.scope import EmptyScopeError, ScopeStack


# ---------------------------------------------------------------------------
# Primitive operations
# ---------------------------------------------------------------------------


class TestPrimitives:
    def test_new_stack_is_empty(self):
        stack = ScopeStack()
        assert stack.is_empty()
        assert len(stack) == 0

    def test_push_and_peek(self):
        stack = ScopeStack()
        stack.push({"a": 1})
        assert stack.peek() == {"a": 1}
        assert not stack.is_empty()

    def test_push_without_scope_adds_empty_mapping(self):
        stack = ScopeStack()
        stack.push()
        assert stack.peek() == {}

    def test_pop_returns_innermost(self):
        stack = ScopeStack()
        stack.push({"a": 1})
        stack.push({"b": 2})
        assert stack.pop() == {"b": 2}
        assert stack.peek() == {"a": 1}

    def test_pop_empty_raises(self):
        with pytest.raises(EmptyScopeError):
            ScopeStack().pop()

    def test_peek_empty_raises(self):
        with pytest.raises(EmptyScopeError):
            ScopeStack().peek()

    def test_empty_scope_error_is_index_error(self):
        assert issubclass(EmptyScopeError, IndexError)

    def test_clear(self):
        stack = ScopeStack()
        stack.push()
        stack.push()
        stack.clear()
        assert stack.is_empty()


# ---------------------------------------------------------------------------
# Lookup and binding
# ---------------------------------------------------------------------------


class TestLookup:
    def test_innermost_wins(self):
        stack = ScopeStack()
        stack.push({"x": "outer"})
        stack.push({"x": "inner"})
        assert stack.lookup("x") == "inner"

    def test_falls_back_to_outer_scope(self):
        stack = ScopeStack()
        stack.push({"x": "outer"})
        stack.push({})
        assert stack.lookup("x") == "outer"

    def test_missing_name_is_none(self):
        stack = ScopeStack()
        stack.push({"x": 1})
        assert stack.lookup("y") is None

    def test_lookup_on_empty_stack_is_none(self):
        assert ScopeStack().lookup("x") is None

    def test_bind_writes_innermost_only(self):
        stack = ScopeStack()
        stack.push({})
        stack.push({})
        stack.bind("x", 1)
        stack.pop()
        assert stack.lookup("x") is None

    def test_bind_overwrites(self):
        stack = ScopeStack()
        stack.push()
        stack.bind("x", 1)
        stack.bind("x", 2)
        assert stack.lookup("x") == 2


# ---------------------------------------------------------------------------
# Child scopes (copy-in, discard-on-pop)
# ---------------------------------------------------------------------------


class TestChild:
    def test_child_sees_parent_bindings(self):
        stack = ScopeStack()
        stack.push({"x": 1})
        with stack.child():
            assert stack.lookup("x") == 1

    def test_child_bindings_discarded_on_exit(self):
        stack = ScopeStack()
        stack.push()
        with stack.child():
            stack.bind("y", 2)
        assert stack.lookup("y") is None
        assert len(stack) == 1

    def test_shadowing_does_not_alter_parent(self):
        stack = ScopeStack()
        stack.push({"x": 1})
        with stack.child():
            stack.bind("x", 99)
            assert stack.lookup("x") == 99
        assert stack.lookup("x") == 1

    def test_child_is_a_snapshot(self):
        stack = ScopeStack()
        stack.push({"x": 1})
        parent = stack.peek()
        with stack.child() as scope:
            parent["x"] = 2
            assert scope["x"] == 1

    def test_child_pops_on_exception(self):
        stack = ScopeStack()
        stack.push()
        with pytest.raises(RuntimeError):
            with stack.child():
                raise RuntimeError("boom")
        assert len(stack) == 1

    def test_child_requires_a_scope(self):
        with pytest.raises(EmptyScopeError):
            with ScopeStack().child():
                pass
