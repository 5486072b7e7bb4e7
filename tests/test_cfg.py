import pytest

from latren.cfg import (
    STANDARD_FORMATTING,
    CFGField,
    CFGFieldType,
    CFGFileTemplate,
    CFGFileTemplateFactory,
    CFGFormatting,
    CFGStringLiteral,
    StructuredField,
    cfg_types_for,
    create_field,
    is_valid_type,
    mandatory,
    optional,
)


def _object(*children):
    obj = CFGField(CFGFieldType.STRUCT)
    for child in children:
        obj.add_item(child)
    return obj


def test_standard_formatting():
    assert STANDARD_FORMATTING.indents == 2
    assert STANDARD_FORMATTING.string_literal is CFGStringLiteral.APOSTROPHES
    assert CFGFormatting() == STANDARD_FORMATTING
    assert CFGFormatting(4, CFGStringLiteral.QUOTES) != STANDARD_FORMATTING


@pytest.mark.parametrize(
    "actual, expected, result",
    [
        (CFGFieldType.INTEGER, CFGFieldType.INTEGER, True),
        (CFGFieldType.INTEGER, CFGFieldType.FLOAT, True),
        (CFGFieldType.INTEGER, CFGFieldType.NUMBER, True),
        (CFGFieldType.FLOAT, CFGFieldType.NUMBER, True),
        (CFGFieldType.FLOAT, CFGFieldType.INTEGER, False),
        (CFGFieldType.STRING, CFGFieldType.NUMBER, False),
        (CFGFieldType.ARRAY, CFGFieldType.STRUCT, False),
    ],
)
def test_is_valid_type(actual, expected, result):
    assert is_valid_type(actual, expected) is result


def test_mandatory_with_types():
    f = mandatory("id", CFGFieldType.STRING)
    assert f.name == "id"
    assert f.required is True
    assert f.types == [CFGFieldType.STRING]
    assert f.is_object is False


def test_optional_with_type_list():
    f = optional("n", [CFGFieldType.INTEGER, CFGFieldType.FLOAT])
    assert f.required is False
    assert f.types == [CFGFieldType.INTEGER, CFGFieldType.FLOAT]


def test_object_field():
    inner = [mandatory("x", CFGFieldType.FLOAT), optional("y", CFGFieldType.FLOAT)]
    f = optional("pos", inner)
    assert f.is_object is True
    assert f.object_params == inner
    assert f.types == []


def test_structured_field_rejects_mixed():
    with pytest.raises(TypeError):
        mandatory("bad", CFGFieldType.STRING, "oops")


def test_add_item_sets_parent_and_lookup():
    a = CFGField(CFGFieldType.STRING, "one", name="a")
    b = CFGField(CFGFieldType.INTEGER, 5, name="b")
    obj = _object(a, b)
    assert a.parent is obj
    assert obj.item_by_name("b") is b
    assert obj.item_by_name("missing") is None
    assert obj.item_by_index(0) is a
    assert obj.item_by_index(2) is None
    assert obj.item_by_index(-1) is None


def test_values_and_item_values():
    arr = CFGField(CFGFieldType.ARRAY, name="nums")
    arr.add_item(CFGField(CFGFieldType.INTEGER, 1))
    arr.add_item(field=CFGField(CFGFieldType.INTEGER, 2))
    obj = _object(arr, CFGField(CFGFieldType.STRING, "s", name="str"))
    assert arr.values() == [1, 2]
    assert obj.item_values("nums") == [1, 2]
    assert obj.item_values("missing") == []
    assert obj.object_by_name("str") is None
    assert obj.object_by_name("nums") is arr


def test_items_on_scalar_raises():
    with pytest.raises(TypeError):
        CFGField(CFGFieldType.STRING, "x").items()
    with pytest.raises(TypeError):
        CFGField(CFGFieldType.INTEGER, 1).add_item(CFGField(CFGFieldType.INTEGER, 2))


def test_has_type_keeps_number_type():
    as_int = CFGField(CFGFieldType.NUMBER, 3)
    as_float = CFGField(CFGFieldType.NUMBER, 3.5)
    assert as_int.has_type(int) and not as_int.has_type(float)
    assert as_float.has_type(float) and not as_float.has_type(int)


@pytest.mark.parametrize(
    "field_type, value",
    [
        (CFGFieldType.STRING, ""),
        (CFGFieldType.INTEGER, 0),
        (CFGFieldType.FLOAT, 0.0),
        (CFGFieldType.NUMBER, 0.0),
        (CFGFieldType.ARRAY, []),
        (CFGFieldType.STRUCT, []),
    ],
)
def test_create_field_defaults(field_type, value):
    f = create_field(field_type)
    assert f.type is field_type
    assert f.value == value
    assert type(f.value) is type(value)


def test_create_field_copies():
    src = CFGField(CFGFieldType.INTEGER, 7, name="count", automatically_created=True)
    copy = create_field(CFGFieldType.INTEGER, src)
    assert copy.value == 7
    assert copy.name == "count"
    assert copy.automatically_created is True
    assert copy is not src


def test_create_field_copy_of_object_is_new_list():
    child = CFGField(CFGFieldType.STRING, "v", name="k")
    src = _object(child)
    copy = create_field(copy_from=src)
    assert copy.type is CFGFieldType.STRUCT
    assert copy.items() == [child]
    copy.add_item(CFGField(CFGFieldType.STRING, "w"))
    assert len(src.items()) == 1


def test_create_field_unsupported():
    with pytest.raises(ValueError):
        create_field(CFGFieldType.RAW)
    with pytest.raises(ValueError):
        create_field()


def test_cfg_types_for():
    assert cfg_types_for(int)[0] is CFGFieldType.INTEGER
    assert cfg_types_for(str) == (CFGFieldType.STRING,)
    assert cfg_types_for(float)[0] is CFGFieldType.FLOAT
    with pytest.raises(KeyError):
        cfg_types_for(dict)


def test_template_factory():
    class Imports(CFGFileTemplateFactory):
        def define_fields(self):
            return [mandatory("path", CFGFieldType.STRING)]

        def define_custom_types(self):
            return {"vec2": [CFGFieldType.STRUCT]}

    template = Imports().create_template()
    assert isinstance(template, CFGFileTemplate)
    assert template.fields == [StructuredField("path", [CFGFieldType.STRING], True)]
    assert template.types == {"vec2": [CFGFieldType.STRUCT]}


def test_default_factory_is_empty():
    template = CFGFileTemplateFactory().create_template()
    assert template.fields == []
    assert template.types == {}