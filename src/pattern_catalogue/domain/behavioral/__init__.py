"""Behavioral patterns."""

from .chain import (
    UNHANDLED,
    Handler,
    HandlerChain,
    HighLevelHandler,
    LevelHandler,
    LowLevelHandler,
    MediumLevelHandler,
    build_default_chain,
)
from .command import (
    TV,
    Command,
    Light,
    LightOffCommand,
    LightOnCommand,
    RemoteControl,
    TVOffCommand,
    TVOnCommand,
)
from .iterator import Collection, Iterator
from .observer import Observer, Subject, SupportsUpdate

__all__ = [
    # Observer
    "Subject",
    "Observer",
    "SupportsUpdate",
    # Chain of Responsibility
    "Handler",
    "LevelHandler",
    "LowLevelHandler",
    "MediumLevelHandler",
    "HighLevelHandler",
    "HandlerChain",
    "build_default_chain",
    "UNHANDLED",
    # Iterator
    "Iterator",
    "Collection",
    # Command
    "Command",
    "LightOnCommand",
    "LightOffCommand",
    "TVOnCommand",
    "TVOffCommand",
    "Light",
    "TV",
    "RemoteControl",
]
