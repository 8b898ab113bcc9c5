import logging

from typing import Any, Callable, Generic, TypeVar

from .common import PipeCallable

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


class PipeFunction(PipeCallable, Generic[A, B]):
    """
    A single stage of a pipe. Wraps one unary function and runs it on `input`.

    Args:
     f: function which takes a single argument and returns a value. Use `functools.partial` to bind
        any other parameters before wrapping.
     name: optional label used in `repr` and log records. Defaults to the function's `__name__`.
    """
    def __init__(self, f: Callable[[A], B], name: str = None) -> None:
        if not callable(f):
            raise TypeError(f"Type {type(f)} not supported for conversion to PipeFunction")
        self._func = f
        self._name = name

    @property
    def name(self) -> str:
        if self._name:
            return self._name
        return getattr(self._func, "__name__", None) or repr(self._func)

    def _exec(self, input: A) -> B:
        return self._func(input)

    def __or__(self, f: Any):
        return Pipe(self, *pipeify(f))

    def __ror__(self, f: Any):
        return Pipe(*pipeify(f), self)

    def __repr__(self):
        return f"PipeFunction({self.name})"


class Pipe(PipeCallable, Generic[A, B]):
    """
    An immutable, deferred chain of unary functions.

    Stages run left to right: the first registered function gets the input, each following one gets the output
    of the stage before it. Chaining with `pipe` (or `|`) never touches the current instance, it returns a new
    `Pipe` holding the old stages plus the new ones, so a pipe can be shared and extended freely.

    Exceptions raised by a stage are not caught. They reach the caller of `invoke` as they were raised and the
    pipe stays usable for later calls.
    """

    def __init__(self, *args: Any) -> None:
        if not args:
            raise ValueError("Pipe requires at least one function")
        self._functions: tuple[PipeFunction, ...] = tuple(
            stage for f in args for stage in pipeify(f)
        )
        logger.debug(f"Built pipe with stages {self.names}")

    @property
    def names(self) -> list[str]:
        return [f.name for f in self._functions]

    def get_functions(self) -> tuple[PipeFunction, ...]:
        return self._functions

    def invoke(self, input: A) -> B:
        return self._exec(input)

    def _exec(self, input: Any):
        for f in self._functions:
            input = f._exec(input)

        return input

    def pipe(self, f: Callable[[B], C]) -> "Pipe[A, C]":
        stages = pipeify(f)
        logger.debug(f"Chaining {[s.name for s in stages]} onto {self.names}")
        return Pipe(*self._functions, *stages)

    chain = pipe

    def __len__(self):
        return len(self._functions)

    def __or__(self, f: Any):
        return self.pipe(f)

    def __ror__(self, f: Any):
        return Pipe(*pipeify(f), *self._functions)

    def __repr__(self):
        return f"Pipe({' | '.join(self.names)})"


def pipe(f: Callable[[A], B]) -> Pipe[A, B]:
    """Start a pipe from a single function."""
    return Pipe(f)


def compose(*functions: Callable) -> Pipe:
    """
    Right-to-left composition: `compose(f, g)(x) == f(g(x))`. Returned as a `Pipe`, so it can be chained further.
    """
    if not functions:
        raise ValueError("compose requires at least one function")
    return Pipe(*reversed(functions))


def pipeify(f: Any) -> tuple[PipeFunction, ...]:
    if isinstance(f, PipeFunction):
        return (f,)
    elif isinstance(f, Pipe):
        return flatten(f)
    elif callable(f):
        return (PipeFunction(f),)
    else:
        raise TypeError(f"Type {type(f)} not supported for conversion to PipeFunction")


def flatten(pipe: Pipe) -> tuple[PipeFunction, ...]:
    return pipe.get_functions()
