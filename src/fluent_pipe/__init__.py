from .common import PipeCallable
from .pipe import Pipe, PipeFunction, compose, pipe, pipeify

__all__ = ["PipeCallable", "Pipe", "PipeFunction", "compose", "pipe", "pipeify"]
