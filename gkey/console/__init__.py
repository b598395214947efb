from .actions import Action, resolve
from .parser import CommandLine, tokenize
from .dispatcher import CommandDispatcher, CommandContext, DispatchOutcome

__all__ = ["Action", "resolve",
           "CommandLine", "tokenize",
           "CommandDispatcher", "CommandContext", "DispatchOutcome"]
