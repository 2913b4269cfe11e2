"""Spritesheet frame selection, clips, easing, markers, a clip library and playback state."""

__version__ = "2.1.0"