"""
flag.py
-------
Deferred flag queue shared by every feature state machine.

Responsibilities
----------------
- Define the Flag base enum: a closed set of variants with a dense index
- Register one handler per variant through the flag_handler decorator
- Mark and unmark variants, then drain them once per tick

Handlers receive a fresh sink queue instead of the live queue. Anything a
handler marks lands in the next generation, so a chain of flags advances by
exactly one step per drain and can never recurse.
"""

from enum import IntEnum
from typing import Any, Callable, Dict, List, Type

from idlefloor.core.debug.debug_logger import DebugLogger


FlagHandler = Callable[["FlagQueue", Any], None]

# Dict[flag enum class, Dict[member, handler]]
_HANDLERS: Dict[type, Dict["Flag", FlagHandler]] = {}


def flag_handler(flag: "Flag"):
    """Decorator registering the handler for one flag variant."""

    def decorator(func: FlagHandler) -> FlagHandler:
        _HANDLERS.setdefault(type(flag), {})[flag] = func
        return func

    return decorator


# ===========================================================
# Flag Variants
# ===========================================================

class Flag(IntEnum):
    """
    Base class for a closed set of flags.

    Subclasses declare members with values 0..N-1 in the order their
    handlers must run.
    """

    @property
    def index(self) -> int:
        """Stable position of this variant in declaration order."""
        return type(self)._member_names_.index(self.name)

    def handle(self, flags: "FlagQueue", context) -> None:
        """Run this variant's transition, raising follow-up flags on `flags`."""
        handler = _HANDLERS.get(type(self), {}).get(self)
        if handler is None:
            raise NotImplementedError(f"No handler registered for {type(self).__name__}.{self.name}")
        handler(flags, context)


def has_all_handlers(flag_type: Type[Flag]) -> bool:
    """True when every member of flag_type has a registered handler."""
    registered = _HANDLERS.get(flag_type, {})
    return all(flag in registered for flag in flag_type)


# ===========================================================
# Flag Queue
# ===========================================================

class FlagQueue:
    """
    Marks pending flags and handles them one generation at a time.

    Usage:
        flags = FlagQueue(FightFlag)
        flags.mark(FightFlag.ATTACK)
        flags.drain(state)    # ATTACK runs; whatever it raises runs next drain
    """

    __slots__ = ("flag_type", "generation", "_marked")

    def __init__(self, flag_type: Type[Flag]):
        self.flag_type = flag_type
        self.generation = 0
        self._marked: List[bool] = [False] * len(flag_type)

    # ===========================================================
    # Marking
    # ===========================================================

    def mark(self, flag: Flag) -> None:
        """Schedule flag for the next drain. Repeated marks collapse into one."""
        self._marked[self._index_of(flag)] = True

    def unmark(self, flag: Flag) -> None:
        """Cancel a pending mark."""
        self._marked[self._index_of(flag)] = False

    def is_marked(self, flag: Flag) -> bool:
        return self._marked[self._index_of(flag)]

    def marked(self) -> List[Flag]:
        """Marked variants in declaration order."""
        return [flag for flag in self.flag_type if self._marked[flag.index]]

    def clear(self) -> None:
        self._marked = [False] * len(self.flag_type)

    def _index_of(self, flag: Flag) -> int:
        if not isinstance(flag, self.flag_type):
            raise TypeError(f"{flag!r} is not a {self.flag_type.__name__}")
        return flag.index

    # ===========================================================
    # Draining
    # ===========================================================

    def drain(self, context) -> List[Flag]:
        """
        Handle every marked flag exactly once, in declaration order.

        Handlers write into a new sink queue; once the pass is complete the
        sink's marks become this queue's marks.

        Args:
            context: Mutable domain state passed to each handler

        Returns:
            The flags handled during this generation
        """
        sink = FlagQueue(self.flag_type)
        handled = self.marked()

        for flag in handled:
            DebugLogger.trace(f"gen {self.generation}: {self.flag_type.__name__}.{flag.name}")
            flag.handle(sink, context)

        self._marked = sink._marked
        self.generation += 1
        return handled

    def __bool__(self) -> bool:
        return any(self._marked)

    def __repr__(self) -> str:
        names = ", ".join(flag.name for flag in self.marked())
        return f'Flags of type "{self.flag_type.__name__}": {names}'
