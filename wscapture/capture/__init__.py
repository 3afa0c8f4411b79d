from .base import FrameSource
from .array import ArrayFrameSource
from .window import FlowControlWindow
from .bottom_up import BottomUpFrameSource

__all__ = [
    "ArrayFrameSource",
    "BottomUpFrameSource",
    "FlowControlWindow",
    "FrameSource",
]
