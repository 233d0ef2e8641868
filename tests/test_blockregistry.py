import pytest

from xlab.blockregistry import BlockRegistry
from xlab.diagramitem import DiagramType


@pytest.fixture
def registry():
    reg = BlockRegistry()
    reg.load(
        {
            "Real-Time": {"gain": "square", "tick": "Triangle", "pid": "S"},
            "Non Real-Time": {"display": "triangle", "oscilloscope": "s"},
        }
    )
    return reg


def test_rt_and_nrt_lists(registry):
    assert registry.all_rt() == ["gain", "tick", "pid"]
    assert registry.all_nrt() == ["display", "oscilloscope"]


def test_real_time_flags(registry):
    assert registry.is_real_time("gain") is True
    assert registry.is_real_time("display") is False


def test_shapes_from_first_letter(registry):
    assert registry.diag_of("gain") is DiagramType.SQUARE
    assert registry.diag_of("tick") is DiagramType.TRIANGLE
    assert registry.diag_of("pid") is DiagramType.SQUARE
    assert registry.diag_of("display") is DiagramType.TRIANGLE


def test_ids_round_trip(registry):
    for block_type in registry.all_rt() + registry.all_nrt():
        assert registry.type_of_id(registry.id_of(block_type)) == block_type


def test_ids_are_distinct_and_sequential(registry):
    ids = [registry.id_of(t) for t in registry.all_rt() + registry.all_nrt()]
    assert ids == list(range(len(ids)))


def test_unknown_shape_letter_is_ignored():
    reg = BlockRegistry()
    reg.register_rt("weird", "circle")
    reg.register_nrt("empty", "")
    assert reg.all_rt() == []
    assert reg.all_nrt() == []


def test_unknown_type_defaults():
    reg = BlockRegistry()
    assert reg.is_real_time("missing") is False
    assert reg.id_of("missing") == 0
    assert reg.diag_of("missing") is DiagramType.STEP
    assert reg.type_of_id(42) == ""


def test_register_block_directly():
    reg = BlockRegistry()
    reg.register_block("sum", True, DiagramType.SQUARE)
    reg.register_block("plot", False, DiagramType.TRIANGLE)
    assert reg.type_of_id(1) == "plot"
    assert reg.all_rt() == ["sum"]


def test_reregistration_takes_new_id():
    reg = BlockRegistry()
    reg.register_block("sum", True, DiagramType.SQUARE)
    reg.register_block("sum", False, DiagramType.TRIANGLE)
    assert reg.id_of("sum") == 1
    assert reg.is_real_time("sum") is False
    assert reg.type_of_id(0) == ""


def test_load_without_sections_registers_nothing():
    reg = BlockRegistry()
    reg.load({"Other": {"gain": "square"}})
    assert reg.all_rt() == [] and reg.all_nrt() == []