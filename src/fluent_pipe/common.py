from abc import ABC, abstractmethod
from typing import Any


class PipeCallable(ABC):
    """Anything that can sit in a pipe: one input in, one output out via `_exec`."""

    @abstractmethod
    def _exec(self, input: Any):
        raise NotImplementedError

    def __call__(self, input):
        return self._exec(input)
