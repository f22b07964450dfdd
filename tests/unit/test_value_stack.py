"""
Tests for ValueStack and the per-instance stack registry.
"""

import copy
import pickle
import pytest
from attrlocal import AttrAccessor, EmptyStackViolation, FunctionAccessor, ValueStack, find_stack, stack_for
from attrlocal.utils.config import STACKS_ATTRIBUTE


class Host:
    pass


class Slotted:
    __slots__ = ("x",)


class TestValueStack:
    def test_push_pop_is_lifo(self):
        stack = ValueStack("x")
        stack.push(1)
        stack.push(2)
        assert stack.depth() == 2
        assert stack.pop() == 2
        assert stack.pop() == 1
        assert stack.depth() == 0

    def test_pop_empty_raises(self):
        stack = ValueStack("x")
        with pytest.raises(EmptyStackViolation) as info:
            stack.pop()
        assert info.value.name == "x"
        assert "'x'" in str(info.value)

    def test_len_tracks_depth(self):
        stack = ValueStack()
        stack.push(None)
        assert len(stack) == 1 == stack.depth()

    def test_peek(self):
        stack = ValueStack("x")
        with pytest.raises(EmptyStackViolation):
            stack.peek()
        stack.push(1)
        assert stack.peek() == 1
        assert stack.depth() == 1

    def test_none_is_a_value(self):
        stack = ValueStack()
        stack.push(None)
        assert stack.pop() is None


class TestStackRegistry:
    def test_created_lazily(self):
        host = Host()
        accessor = AttrAccessor("x")
        assert find_stack(host, accessor) is None
        stack = stack_for(host, accessor)
        assert find_stack(host, accessor) is stack
        assert stack_for(host, accessor) is stack

    def test_stored_on_instance(self):
        host = Host()
        stack = stack_for(host, AttrAccessor("x"))
        assert vars(host)[STACKS_ATTRIBUTE]["x"] is stack

    def test_per_instance(self):
        accessor = AttrAccessor("x")
        assert stack_for(Host(), accessor) is not stack_for(Host(), accessor)

    def test_per_attribute(self):
        host = Host()
        assert stack_for(host, AttrAccessor("x")) is not stack_for(host, AttrAccessor("y"))

    def test_function_accessor_does_not_share_attr_stack(self):
        host = Host()
        fn = FunctionAccessor("x", getter=lambda o: 0, setter=lambda o, v: None)
        assert stack_for(host, fn) is not stack_for(host, AttrAccessor("x"))

    def test_instance_without_dict(self):
        with pytest.raises(TypeError, match="no __dict__"):
            stack_for(Slotted(), AttrAccessor("x"))

    def test_shallow_copy_gets_its_own_stacks(self):
        host = Host()
        accessor = AttrAccessor("x")
        original = stack_for(host, accessor)
        twin = copy.copy(host)
        assert find_stack(twin, accessor) is None
        assert stack_for(twin, accessor) is not original
        assert stack_for(host, accessor) is original

    def test_deepcopy_and_pickle_get_their_own_stacks(self):
        host = Host()
        accessor = AttrAccessor("x")
        stack_for(host, accessor).push(1)
        for clone in (copy.deepcopy(host), pickle.loads(pickle.dumps(host))):
            assert find_stack(clone, accessor) is None
            assert stack_for(clone, accessor).depth() == 0
