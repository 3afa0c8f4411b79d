from .frame_loop import FrameLoop
from .settings import load_settings
from .logging import configure_logging
from .dependencies import build_controller

__all__ = ["FrameLoop", "build_controller", "configure_logging", "load_settings"]
