"""Tests for the runtime-registered extensible factory."""

import logging
from unittest.mock import Mock, patch

import pytest

from design_patterns.creational.extensible_factory import (
    GameObjectFactory,
    load_level,
    main,
    register_default_objects,
)
from design_patterns.domain.core.exceptions import ValidationError
from design_patterns.domain.game_objects import Ant, Boat, Plane


class TestGameObjectFactory:
    """Test registration and creation."""

    def test_registered_key_creates_expected_variant(self):
        GameObjectFactory.register_object("plane", Plane.create)

        obj = GameObjectFactory.create_single_object("plane")

        assert isinstance(obj, Plane)
        assert Plane.objects_created == 1

    def test_unregistered_key_returns_none(self):
        assert GameObjectFactory.create_single_object("plane") is None

    def test_callback_is_invoked_once_per_creation(self):
        callback = Mock(return_value="created")
        GameObjectFactory.register_object("mock", callback)

        assert GameObjectFactory.create_single_object("mock") == "created"
        callback.assert_called_once_with()

    def test_register_replaces_existing_callback(self):
        GameObjectFactory.register_object("vehicle", Plane.create)
        GameObjectFactory.register_object("vehicle", Boat.create)

        assert isinstance(GameObjectFactory.create_single_object("vehicle"), Boat)
        assert GameObjectFactory.registered_types() == ["vehicle"]

    def test_unregister(self):
        GameObjectFactory.register_object("ant", Ant.create)

        GameObjectFactory.unregister_object("ant")

        assert not GameObjectFactory.is_registered("ant")
        assert GameObjectFactory.create_single_object("ant") is None

    def test_unregister_unknown_is_noop(self):
        GameObjectFactory.unregister_object("never-registered")
        assert GameObjectFactory.registered_types() == []

    def test_register_default_objects(self):
        register_default_objects()
        assert sorted(GameObjectFactory.registered_types()) == ["ant", "boat", "plane"]

    def test_clear_registrations(self):
        register_default_objects()
        GameObjectFactory.clear_registrations()
        assert GameObjectFactory.registered_types() == []

    @pytest.mark.parametrize("type_name", ["", None, 3])
    def test_invalid_type_name_rejected(self, type_name):
        with pytest.raises(ValidationError, match="non-empty string"):
            GameObjectFactory.register_object(type_name, Plane.create)

    def test_non_callable_callback_rejected(self):
        with pytest.raises(ValidationError, match="not callable"):
            GameObjectFactory.register_object("plane", "Plane")


class TestLoadLevel:
    """Test building objects from a level file."""

    def setup_method(self):
        register_default_objects()

    def test_objects_created_in_file_order(self, level_file):
        path = level_file("plane", "boat", "ant", "boat")

        objects = load_level(path)

        assert [type(obj) for obj in objects] == [Plane, Boat, Ant, Boat]

    def test_trailing_whitespace_stripped_and_blank_lines_skipped(self, level_file):
        path = level_file("plane  ", "", "boat\t", "   ")

        objects = load_level(path)

        assert [type(obj) for obj in objects] == [Plane, Boat]

    def test_leading_whitespace_kept(self, level_file):
        """Only trailing whitespace is stripped, so an indented name is unknown."""
        path = level_file("  plane", "boat")

        objects = load_level(path)

        assert objects[0] is None
        assert isinstance(objects[1], Boat)

    def test_invalid_utf8_raises_validation_error(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_bytes(b"plane\n\xff\xfeboat\n")

        with pytest.raises(ValidationError, match="Failed to read level file") as exc_info:
            load_level(path)

        assert exc_info.value.details == str(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_unreadable_file_raises_validation_error(self, level_file):
        path = level_file("plane")

        with patch(
            "design_patterns.creational.extensible_factory.open",
            side_effect=PermissionError("permission denied"),
            create=True,
        ):
            with pytest.raises(ValidationError, match="permission denied"):
                load_level(path)

    def test_unknown_names_yield_none(self, level_file):
        path = level_file("plane", "dragon")

        objects = load_level(path)

        assert isinstance(objects[0], Plane)
        assert objects[1] is None

    def test_missing_file_yields_empty_list(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            objects = load_level(tmp_path / "missing.txt")

        assert objects == []
        assert "Level file not found" in caplog.text


class TestMain:
    """Test the extensible factory demo."""

    def test_renders_each_object(self, level_file, capsys):
        level_file("plane", "boat", "ant")

        main()

        assert capsys.readouterr().out == "plane\nboat\nant\n"

    def test_explicit_level_file(self, level_file, capsys):
        path = level_file("ant", "ant", name="custom.txt")

        main(str(path))

        assert capsys.readouterr().out == "ant\nant\n"

    def test_unknown_objects_skipped(self, level_file, capsys, caplog):
        level_file("plane", "dragon", "boat")

        with caplog.at_level(logging.WARNING):
            main()

        assert capsys.readouterr().out == "plane\nboat\n"
        assert "Skipping unknown object type" in caplog.text

    def test_level_file_from_environment(self, level_file, capsys, monkeypatch):
        path = level_file("boat", name="env_level.txt")
        monkeypatch.setenv("DESIGN_PATTERNS_LEVEL_FILE", str(path))

        main()

        assert capsys.readouterr().out == "boat\n"
