import pytest

from latren.resourcetypes import ResourceType

SINGLE_TYPES = [
    ResourceType.TEXTURE,
    ResourceType.SHADER,
    ResourceType.FONT,
    ResourceType.MODEL,
    ResourceType.STAGE,
    ResourceType.AUDIO,
    ResourceType.DATA,
    ResourceType.TEXT,
    ResourceType.BINARY,
    ResourceType.JSON,
    ResourceType.CFG,
    ResourceType.MATERIAL,
    ResourceType.OBJECT,
    ResourceType.BLUEPRINT,
]


@pytest.mark.parametrize("kind", SINGLE_TYPES)
def test_all_contains_every_type(kind):
    assert ResourceType.ALL.has(kind)
    assert kind.has(ResourceType.ALL)


@pytest.mark.parametrize("kind", SINGLE_TYPES)
def test_none_has_nothing(kind):
    assert not ResourceType.NONE.has(kind)


def test_bit_values_fixed_by_format():
    assert ResourceType(1) is ResourceType.TEXTURE
    assert ResourceType(1 << 31) is ResourceType.MATERIAL
    assert ResourceType(1 << 29) is ResourceType.BLUEPRINT
    assert not ResourceType(1 << 29).has(ResourceType.MATERIAL)


def test_single_types_are_distinct_bits():
    combined = 0
    for kind in SINGLE_TYPES:
        assert combined & int(kind) == 0
        combined |= int(kind)
    assert ResourceType(combined) == ResourceType.ALL


def test_combined_mask():
    mask = ResourceType.TEXTURE | ResourceType.AUDIO
    assert ResourceType.TEXTURE.has(mask)
    assert ResourceType.AUDIO.has(mask)
    assert not ResourceType.SHADER.has(mask)
    assert (mask & ResourceType.AUDIO) == ResourceType.AUDIO
    assert (mask ^ ResourceType.AUDIO) == ResourceType.TEXTURE