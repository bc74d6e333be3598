"""Animation primitives for user interfaces: easing curves, keyframe timelines, springs and groups."""

__version__ = "0.1.0"
__all__ = ["easing", "keyframe", "spring", "groups"]