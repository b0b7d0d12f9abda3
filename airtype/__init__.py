"""Protocol, thread-safe queue, entity-component store, sprite state and controls for a side-scrolling shooter."""

__version__ = "0.1.0"

__all__ = ["protocol", "safequeue", "ecs", "components", "sprites", "controls"]