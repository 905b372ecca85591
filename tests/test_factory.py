"""Tests for shape records and the type-tag registry."""

import json
import math

import pytest

from footprint.shapes.circle import ShapeCircle2D
from footprint.shapes.config import ConfigurationError, ShapeConfig
from footprint.shapes.cuboid import ShapeCuboid3D
from footprint.shapes.factory import SHAPE_REGISTRY, create_shape, register_shape
from footprint.shapes.rectangle import ShapeRectangle2D, ShapeRectangle2DAsymmetric
from footprint.shapes.sphere import ShapeSphere3D


@pytest.mark.parametrize("record, cls", [
    ({"type": "circle", "parameters": {"radius": 1.5}}, ShapeCircle2D),
    ({"type": "sphere", "parameters": {"radius": 2}}, ShapeSphere3D),
    ({"type": "rectangle", "parameters": {"dimX": 4.0, "dimY": 2.0}}, ShapeRectangle2D),
    ({"type": "rectangle_asymmetric",
      "parameters": {"positiveX": 3.0, "negativeX": 1.0, "positiveY": 1.0, "negativeY": 0.5}},
     ShapeRectangle2DAsymmetric),
    ({"type": "cuboid", "parameters": {"dimX": 2, "dimY": 4, "dimZ": 6}}, ShapeCuboid3D),
])
def test_tags_resolve(record, cls):
    shape = create_shape(record)
    assert type(shape) is cls
    assert shape.TYPE == record["type"]
    assert SHAPE_REGISTRY[record["type"]] is cls


def test_class_key_alias():
    shape = create_shape({"class": "circle", "parameters": {"radius": 0.5}})
    assert shape.radius == 0.5


def test_asymmetric_record_negates_back_and_right():
    shape = create_shape({"type": "rectangle_asymmetric",
                          "parameters": {"positiveX": 3.0, "negativeX": 1.0, "positiveY": 1.0, "negativeY": 0.5}})
    assert shape.negative_x == -1.0
    assert shape.negative_y == -0.5
    assert shape.border_distance_at_relative_angle(math.pi) == pytest.approx(1.0)


def test_missing_parameter():
    with pytest.raises(ConfigurationError, match="required field parameters.dimY is empty"):
        create_shape({"type": "rectangle", "parameters": {"dimX": 4.0}})


def test_nan_parameter_counts_as_missing():
    with pytest.raises(ConfigurationError, match="parameters.radius"):
        create_shape({"type": "circle", "parameters": {"radius": float("nan")}})


def test_missing_tag():
    with pytest.raises(ConfigurationError, match="required value type is missing"):
        create_shape({"parameters": {"radius": 1.0}})


def test_unknown_tag():
    with pytest.raises(ConfigurationError, match="shape type 'hexagon' is not registered"):
        create_shape({"type": "hexagon", "parameters": {}})


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        create_shape({"type": "", "parameters": {}})


def test_duplicate_registration():
    with pytest.raises(ConfigurationError):
        @register_shape("circle")
        class OtherCircle(ShapeCircle2D):
            pass
    assert SHAPE_REGISTRY["circle"] is ShapeCircle2D


class TestShapeConfig:

    def test_get_float(self):
        config = ShapeConfig({"type": "circle", "parameters": {"radius": "2.5"}})
        assert config.get_float("parameters.radius") == 2.5
        assert math.isnan(config.get_float("parameters.dimX"))
        assert config.get_float("parameters.dimX", 1.0) == 1.0

    def test_get_string(self):
        config = ShapeConfig({"type": "circle"})
        assert config.get_string("type") == "circle"
        assert config.get_string("parameters.name", "none") == "none"

    def test_not_a_number(self):
        with pytest.raises(ConfigurationError):
            ShapeConfig({"parameters": {"radius": "wide"}}).get_float("parameters.radius")

    def test_from_json(self, tmp_path):
        path = tmp_path / "shape.json"
        path.write_text(json.dumps({"type": "cuboid", "parameters": {"dimX": 1, "dimY": 2, "dimZ": 3}}))
        shape = create_shape(ShapeConfig.from_json(path))
        assert shape.max_radius == pytest.approx(math.sqrt(0.25 + 1.0 + 2.25))
