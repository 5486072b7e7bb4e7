import pytest

from latren.serializablestruct import MetaType, SerializableStruct, VideoSettings


def test_video_settings_defaults():
    settings = VideoSettings()
    assert settings.get_member("gamma") == 1.0
    assert settings.get_member("fov") == 60.0
    assert settings.get_member("useVsync") is True
    assert settings.get_member("fullscreen") is False
    assert settings.get_member("fullscreenResolution") == (-1, -1)


def test_member_order_and_meta():
    settings = VideoSettings()
    fields = [m.name for m in settings.members() if m.is_field]
    assert fields == [
        "gamma", "contrast", "brightness", "saturation", "fov",
        "useVsync", "fullscreen", "resolution", "fullscreenResolution",
    ]
    kinds = [m.meta_type for m in settings.members()]
    assert kinds.count(MetaType.NEWLINE) == 3
    comments = [m for m in settings.members() if m.meta_type is MetaType.COMMENT]
    assert [c.meta_data for c in comments] == ["-1 -1 for auto"]


def test_comment_precedes_fullscreen_resolution():
    members = VideoSettings().members()
    names = [m.name for m in members]
    index = names.index("fullscreenResolution")
    assert members[index - 1].meta_type is MetaType.COMMENT


def test_set_and_get():
    settings = VideoSettings()
    settings.set_member("fov", 90)
    assert settings.get_member("fov") == 90.0
    assert isinstance(settings.get_member("fov"), float)
    settings.set_member("resolution", [800, 600])
    assert settings.get_member("resolution") == (800, 600)


def test_wrong_type_rejected():
    settings = VideoSettings()
    with pytest.raises(TypeError):
        settings.set_member("useVsync", "yes")
    with pytest.raises(TypeError):
        settings.set_member("gamma", True)


def test_unknown_member():
    settings = VideoSettings()
    with pytest.raises(KeyError):
        settings.get_member("nope")
    with pytest.raises(KeyError):
        settings.member_data("nope")


def test_meta_member_has_no_value():
    settings = VideoSettings()
    meta = next(m for m in settings.members() if not m.is_field)
    with pytest.raises(KeyError):
        settings.get_member(meta.name)


def test_copy_from_copies_values():
    source = VideoSettings()
    source.set_member("gamma", 2.5)
    source.set_member("fullscreen", True)
    target = VideoSettings()
    target.copy_from(source)
    assert target.get_member("gamma") == 2.5
    assert target.get_member("fullscreen") is True
    assert len(target.members()) == len(source.members())


def test_copy_from_adds_missing_members():
    target = SerializableStruct()
    source = VideoSettings()
    target.copy_from(source)
    assert [m.name for m in target.members()] == [m.name for m in source.members()]
    assert target.get_member("saturation") == source.get_member("saturation")


def test_iteration_yields_field_values():
    settings = VideoSettings()
    values = dict(iter(settings))
    assert values["contrast"] == settings.get_member("contrast")
    assert all(not name.startswith("_meta") for name in values)