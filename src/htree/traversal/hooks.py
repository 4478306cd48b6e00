# traversal/hooks.py
from typing import Protocol

from htree.app.protocols import BranchLike


class TraversalHooks(Protocol):
    def traversal_start(self, *, order, expected): ...
    def segment(self, branch: BranchLike, *, seq): ...
    def traversal_end(self, *, produced, wall_ms, completed): ...


class NoopHooks:
    def traversal_start(self, **_):
        pass

    def segment(self, *_, **__):
        pass

    def traversal_end(self, **_):
        pass
