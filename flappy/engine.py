"""A small reactive scene graph: nodes with state, effects and per-frame hooks."""

from __future__ import annotations

import copy
import weakref
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")

_MISSING = object()


class _Slot(Generic[T]):
    """Storage cell shared by every handle to one piece of node state."""

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value


class State(Generic[T]):
    """A handle to a value owned by a node; copies of the handle share the value."""

    __slots__ = ("_slot",)

    def __init__(self, slot: Optional[_Slot[T]] = None) -> None:
        self._slot = slot

    def get(self) -> T:
        if self._slot is None:
            raise RuntimeError("Accessing uninitialized state via get()")
        return self._slot.value

    def set(self, value: T) -> None:
        if self._slot is None:
            raise RuntimeError("Accessing uninitialized state via set()")
        self._slot.value = value

    def is_valid(self) -> bool:
        return self._slot is not None

    def __repr__(self) -> str:
        if self._slot is None:
            return "State(<uninitialized>)"
        return f"State({self._slot.value!r})"


class _Dependency:
    """Tracks the last value of a state an effect depends on."""

    __slots__ = ("state", "last")

    def __init__(self, state: State[Any]) -> None:
        self.state = state
        self.last: Any = _MISSING

    def has_changed(self) -> bool:
        if not self.state.is_valid():
            return False
        current = self.state.get()
        if self.last is _MISSING:
            return True
        if isinstance(current, list) and isinstance(self.last, list):
            return len(current) != len(self.last)
        try:
            return bool(current != self.last)
        except Exception:
            return True

    def remember(self) -> None:
        if self.state.is_valid():
            self.last = copy.copy(self.state.get())
        else:
            self.last = _MISSING


class EffectHook:
    """An effect that runs on its first check and whenever a dependency changes."""

    def __init__(self, fn: Callable[[], None]) -> None:
        self._fn = fn
        self._dependencies: list[_Dependency] = []
        self._first_run = True

    def add_dependency(self, dep: Any) -> None:
        """Track ``dep`` if it is a State; anything else carries no dependency."""
        if isinstance(dep, State):
            self._dependencies.append(_Dependency(dep))

    def run_if_changed(self) -> bool:
        """Run the effect if needed; return whether it ran."""
        if not self._first_run and not any(d.has_changed() for d in self._dependencies):
            return False
        self._fn()
        for dep in self._dependencies:
            dep.remember()
        self._first_run = False
        return True


class Node:
    """A scene-graph node holding children and hooks."""

    def __init__(self, parent: Optional[Node] = None, children: Iterable[Optional[Node]] = ()) -> None:
        self.parent = parent
        self.children: list[Node] = []
        self._states: list[State[Any]] = []
        self._updates: list[Callable[[float], None]] = []
        self._renders: list[Callable[[Any], None]] = []
        self._events: list[Callable[[Any], None]] = []
        self._effects: list[EffectHook] = []
        for child in children:
            self.add_child(child)

    def add_child(self, child: Optional[Node]) -> None:
        if child is not None:
            self.children.append(child)
            child.parent = self

    def remove_child(self, child: Optional[Node]) -> None:
        if child is None:
            return
        kept = []
        for existing in self.children:
            if existing is child:
                existing.parent = None
            else:
                kept.append(existing)
        self.children = kept

    def set_children(self, children: Iterable[Optional[Node]]) -> None:
        for old in self.children:
            old.parent = None
        self.children = []
        for child in children:
            self.add_child(child)

    def find_state(self, kind: type) -> Optional[State[Any]]:
        """Return the first state of this node whose value is a ``kind``."""
        return next((s for s in self._states if isinstance(s.get(), kind)), None)

    def state(self, initial: T) -> State[T]:
        handle: State[T] = State(_Slot(initial))
        self._states.append(handle)
        return handle

    def update(self, fn: Callable[[float], None]) -> Callable[[float], None]:
        self._updates.append(fn)
        return fn

    def render(self, fn: Callable[[Any], None]) -> Callable[[Any], None]:
        self._renders.append(fn)
        return fn

    def event(self, fn: Callable[[Any], None]) -> Callable[[Any], None]:
        self._events.append(fn)
        return fn

    def effect(self, fn: Callable[[], None], *args: Any) -> EffectHook:
        hook = EffectHook(fn)
        for dep in args:
            hook.add_dependency(dep)
        self._effects.append(hook)
        return hook

    def derived(self, compute: Callable[[], T], *args: Any) -> State[T]:
        """A state recomputed from ``compute`` whenever a dependency changes."""
        result = self.state(compute())
        self.effect(lambda: result.set(compute()), *args)
        return result


def val(prop: Any) -> Any:
    """Resolve a prop that is a plain value, a State, or a zero-argument callable."""
    if isinstance(prop, State):
        if prop.is_valid():
            return prop.get()
        raise RuntimeError("Invalid prop state or uninitialized provider")
    if callable(prop):
        return prop()
    return prop


def conditional(condition: State[bool], child: Optional[Node]) -> Node:
    """A node that holds ``child`` only while ``condition`` is true."""
    node = Node()
    node_ref = weakref.ref(node)

    def sync() -> None:
        owner = node_ref()
        if owner is None or child is None:
            return
        present = any(c is child for c in owner.children)
        if condition.get():
            if not present:
                owner.add_child(child)
        elif present:
            owner.remove_child(child)

    node.effect(sync, condition)
    return node


def fragment(*args: Optional[Node]) -> Node:
    """Group children under a node with no behaviour of its own."""
    return Node(children=args)


def update_tree(node: Optional[Node], dt: float) -> None:
    if node is None:
        return
    for fn in list(node._updates):
        fn(dt)
    for hook in list(node._effects):
        hook.run_if_changed()
    for child in list(node.children):
        update_tree(child, dt)


def render_tree(node: Optional[Node], surface: Any) -> None:
    if node is None:
        return
    for fn in list(node._renders):
        fn(surface)
    for child in list(node.children):
        render_tree(child, surface)


def event_tree(node: Optional[Node], event: Any) -> None:
    if node is None or event is None:
        return
    for fn in list(node._events):
        fn(event)
    for child in list(node.children):
        event_tree(child, event)