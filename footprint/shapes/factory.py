# footprint/shapes/factory.py
"""
Static registry from type tag to shape class.

Shape modules register themselves with @register_shape("tag"); create_shape
imports the built-in modules once so the registry is complete before lookup.
"""
import importlib
import logging

from footprint.shapes.config import ConfigurationError, ShapeConfig

logger = logging.getLogger(__name__)

SHAPE_REGISTRY = {}

BUILTIN_SHAPE_MODULES = (
    "footprint.shapes.circle",
    "footprint.shapes.sphere",
    "footprint.shapes.rectangle",
    "footprint.shapes.cuboid",
)


def register_shape(tag: str):
    """Class decorator: make `cls` constructible from records tagged `tag`."""
    def decorator(cls):
        if tag in SHAPE_REGISTRY and SHAPE_REGISTRY[tag] is not cls:
            raise ConfigurationError(f"shape type '{tag}' is already registered")
        SHAPE_REGISTRY[tag] = cls
        cls.TYPE = tag
        return cls
    return decorator


def load_builtin_shapes():
    for name in BUILTIN_SHAPE_MODULES:
        importlib.import_module(name)


def create_shape(config):
    """Build the shape described by `config` (a ShapeConfig or a plain mapping)."""
    if not isinstance(config, ShapeConfig):
        config = ShapeConfig(config)
    load_builtin_shapes()

    tag = config.type_tag
    if not tag:
        raise ConfigurationError("required value type is missing")
    cls = SHAPE_REGISTRY.get(tag)
    if cls is None:
        raise ConfigurationError(f"shape type '{tag}' is not registered")

    logger.debug("resolved shape type '%s' to %s", tag, cls.__name__)
    return cls.from_config(config)
