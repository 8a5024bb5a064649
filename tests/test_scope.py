import pytest

from minilisp.errors import LispScopeError
from minilisp.types.binding import Binding
from minilisp.types.scope import ScopeStack
from minilisp.types.symbol import Symbol


def test_default_scope_binds_booleans(scope):
    assert scope.depth == 1
    assert scope.lookup("False") == Binding((), ())
    assert scope.lookup("True") == Binding((), (1.0,))
    assert scope.contains("True")
    assert not scope.contains("x")
    assert scope.lookup("x") is None


def test_push_and_pop_frames(scope):
    scope.push_frame()
    scope.push_frame()
    assert scope.depth == 3
    scope.pop_frame()
    scope.pop_frame()
    assert scope.depth == 1


def test_frame_context_manager_pops_on_error(scope):
    with pytest.raises(RuntimeError):
        with scope.frame():
            assert scope.depth == 2
            raise RuntimeError("boom")
    assert scope.depth == 1


def test_inner_frame_shadows_without_destroying(scope):
    scope.define_value("x", 1.0)
    with scope.frame():
        scope.define_value("x", 2.0)
        assert scope.lookup("x").body == 2.0
    assert scope.lookup("x").body == 1.0


def test_outer_bindings_visible_from_inner_frames(scope):
    scope.define_value("x", 1.0)
    with scope.frame():
        with scope.frame():
            assert scope.contains("x")
            assert scope.lookup("x").body == 1.0


def test_definitions_go_to_top_frame(scope):
    with scope.frame():
        scope.define_value("tmp", Symbol("a"))
        assert scope.contains("tmp")
    assert not scope.contains("tmp")


def test_redefinition_overwrites_within_frame(scope):
    scope.define_value("x", 1.0)
    scope.define_function("x", ["a"], Symbol("a"))
    binding = scope.lookup("x")
    assert binding.is_function
    assert binding.params == ("a",)


def test_define_function(scope):
    scope.define_function("f", ["a", "b"], (Symbol("+"), Symbol("a"), Symbol("b")))
    binding = scope.lookup("f")
    assert binding.is_function
    assert binding.arity == 2
    assert binding.body == (Symbol("+"), Symbol("a"), Symbol("b"))


def test_function_with_no_params_is_a_value_binding(scope):
    scope.define_function("thunk", [], 7.0)
    assert not scope.lookup("thunk").is_function


def test_empty_scope_cannot_define():
    scope = ScopeStack.empty()
    assert scope.depth == 0
    with pytest.raises(LispScopeError):
        scope.define_value("x", 1.0)
    with pytest.raises(LispScopeError):
        scope.define_function("f", ["a"], Symbol("a"))


def test_from_vars():
    scope = ScopeStack.from_vars([("a", 1.0), ("b", (2.0,))])
    assert scope.depth == 1
    assert scope.lookup("a").body == 1.0
    assert scope.lookup("b").body == (2.0,)


def test_repr_lists_frames(scope):
    scope.define_value("x", 1.0)
    text = repr(scope)
    assert text.startswith("<ScopeStack: ")
    assert "x: <Binding 1.0>" in text
