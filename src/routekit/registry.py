"""Registry for pluggable route sequencers."""

from routekit.utils.logging import RoutekitLogger

from .interfaces import RouteSequencer

logger = RoutekitLogger.get_logger(__name__)

SEQUENCER_REGISTRY: dict[str, type[RouteSequencer]] = {}

__all__ = [
    "register_sequencer",
    "get_sequencer",
    "SEQUENCER_REGISTRY",
]


def register_sequencer(name: str):
    """Decorator to register a route sequencer implementation."""

    def decorator(cls: type[RouteSequencer]):
        if name in SEQUENCER_REGISTRY:
            raise ValueError(f"Sequencer '{name}' is already registered")
        SEQUENCER_REGISTRY[name] = cls
        logger.debug(f"Registered sequencer '{name}' -> {cls.__name__}")
        return cls

    return decorator


def get_sequencer(name: str) -> RouteSequencer:
    """Instantiate the sequencer registered under ``name``."""
    # Built-ins register themselves on import
    import routekit.sequencing  # noqa: F401

    sequencer_class = SEQUENCER_REGISTRY.get(name)
    if sequencer_class is None:
        available = ", ".join(sorted(SEQUENCER_REGISTRY))
        raise ValueError(f"Unknown sequencing method: {name} (available: {available})")
    return sequencer_class()
