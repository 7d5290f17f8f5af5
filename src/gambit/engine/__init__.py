"""Automated opponent: move selection and an optional Qt worker bridge.

The Qt bridge lives in :mod:`gambit.engine.qt_bridge` and needs the ``qt``
extra; it is not imported here.
"""

from gambit.engine.search import IMoveSelector, SelectorSettings
from gambit.engine.selector import CaptureFirstSelector

DefaultSelector: type[IMoveSelector] = CaptureFirstSelector

__all__ = [
    "CaptureFirstSelector",
    "DefaultSelector",
    "IMoveSelector",
    "SelectorSettings",
]
