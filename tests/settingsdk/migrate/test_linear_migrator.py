"""Tests for LinearMigrator and LinearMigratorModel."""

from typing import ClassVar

import pytest
from pydantic import BaseModel

from settingsdk.migrate import (
    DowncastSettingError,
    LinearlyMigrateable,
    LinearMigrator,
    LinearMigratorModel,
    MigrationDirection,
    MigrationResult,
    ModelRegistry,
    NoDefinedMigrationError,
    NoMigrationRouteError,
    NoSuchModelError,
    SerializeMigrationResultError,
    SubMigrationError,
)
from settingsdk.model import SerializeValueError, SettingsModel, VersionedSetting


class NameV1(BaseModel, LinearlyMigrateable):
    version: ClassVar[str] = "v1"
    migrates_forward_to: ClassVar[str | None] = "v2"

    name: str

    def migrate_forward(self) -> "NameV2":
        first, _, last = self.name.partition(" ")
        return NameV2(first=first, last=last)


class NameV2(BaseModel, LinearlyMigrateable):
    version: ClassVar[str] = "v2"
    migrates_forward_to: ClassVar[str | None] = "v3"
    migrates_backward_to: ClassVar[str | None] = "v1"

    first: str
    last: str

    def migrate_forward(self) -> "NameV3":
        return NameV3(first=self.first, last=self.last)

    def migrate_backward(self) -> NameV1:
        return NameV1(name=f"{self.first} {self.last}".strip())


class NameV3(BaseModel, LinearlyMigrateable):
    version: ClassVar[str] = "v3"
    migrates_backward_to: ClassVar[str | None] = "v2"

    first: str
    last: str
    nickname: str | None = None

    def migrate_backward(self) -> NameV2:
        return NameV2(first=self.first, last=self.last)


class BrokenV1(BaseModel, LinearlyMigrateable):
    version: ClassVar[str] = "v1"
    migrates_forward_to: ClassVar[str | None] = "v2"

    def migrate_forward(self) -> "BrokenV2":
        raise ValueError("cannot migrate")


class BrokenV2(BaseModel, LinearlyMigrateable):
    version: ClassVar[str] = "v2"
    migrates_backward_to: ClassVar[str | None] = "v1"


class PlainModel(BaseModel, SettingsModel):
    version: ClassVar[str] = "v1"


def registry_of(*model_classes) -> ModelRegistry:
    models = [LinearMigratorModel(model_class) for model_class in model_classes]
    return ModelRegistry({model.version: model for model in models})


@pytest.fixture
def name_models() -> ModelRegistry:
    return registry_of(NameV1, NameV2, NameV3)


@pytest.fixture
def migrator() -> LinearMigrator:
    return LinearMigrator()


class TestLinearMigratorModel:
    """Test the type-erased model used by the linear migrator."""

    def test_requires_linearly_migrateable(self):
        """Should reject models without migration links."""
        with pytest.raises(TypeError, match="not LinearlyMigrateable"):
            LinearMigratorModel(PlainModel)

    def test_migrates_to(self):
        """Should expose the model's declared neighbours."""
        model = LinearMigratorModel(NameV2)

        assert model.version == "v2"
        assert model.migrates_to(MigrationDirection.FORWARD) == "v3"
        assert model.migrates_to(MigrationDirection.BACKWARD) == "v1"

    def test_migrate(self):
        """Should apply the model's transform in the given direction."""
        model = LinearMigratorModel(NameV1)

        migrated = model.migrate(NameV1(name="Ada Lovelace"), MigrationDirection.FORWARD)

        assert migrated == NameV2(first="Ada", last="Lovelace")

    def test_migrate_wrong_type(self):
        """Should fail to downcast a value of another model."""
        model = LinearMigratorModel(NameV1)

        with pytest.raises(DowncastSettingError) as exc_info:
            model.migrate(NameV2(first="Ada", last="Lovelace"), MigrationDirection.FORWARD)

        assert exc_info.value.version == "v1"

    def test_migrate_no_defined_migration(self):
        """Should refuse to migrate past the end of the chain."""
        model = LinearMigratorModel(NameV3)

        with pytest.raises(NoDefinedMigrationError) as exc_info:
            model.migrate(NameV3(first="Ada", last="Lovelace"), MigrationDirection.FORWARD)

        assert str(exc_info.value) == "No 'forward' migration for setting version 'v3'"

    def test_migrate_failure(self):
        """Should wrap exceptions raised by the transform."""
        model = LinearMigratorModel(BrokenV1)

        with pytest.raises(SubMigrationError) as exc_info:
            model.migrate(BrokenV1(), MigrationDirection.FORWARD)

        error = exc_info.value
        assert (error.from_version, error.to_version) == ("v1", "v2")
        assert error.direction is MigrationDirection.FORWARD
        assert isinstance(error.__cause__, ValueError)
        assert "cannot migrate" in str(error)

    def test_serialize(self):
        """Should serialize values of the model to JSON."""
        model = LinearMigratorModel(NameV3)

        assert model.serialize(NameV3(first="Ada", last="Lovelace")) == {
            "first": "Ada",
            "last": "Lovelace",
            "nickname": None,
        }

    def test_serialize_wrong_type(self):
        """Should fail to downcast a value of another model."""
        with pytest.raises(DowncastSettingError):
            LinearMigratorModel(NameV3).serialize(NameV1(name="Ada"))

    def test_serialize_failure(self, mocker):
        """Should report serialization failures as migration result errors."""
        mocker.patch.object(
            VersionedSetting, "serialize", side_effect=SerializeValueError("v1", "bad value")
        )

        with pytest.raises(SerializeMigrationResultError):
            LinearMigratorModel(NameV1).serialize(NameV1(name="Ada"))


class TestPerformMigration:
    """Test point-to-point migration."""

    def test_forward(self, migrator, name_models):
        """Should apply every forward transform up to the target."""
        result = migrator.perform_migration(
            name_models, NameV1(name="Ada Lovelace"), "v1", "v3"
        )

        assert result == {"first": "Ada", "last": "Lovelace", "nickname": None}

    def test_backward(self, migrator, name_models):
        """Should apply every backward transform down to the target."""
        result = migrator.perform_migration(
            name_models, NameV3(first="Ada", last="Lovelace", nickname="Countess"), "v3", "v1"
        )

        assert result == {"name": "Ada Lovelace"}

    def test_identity(self, migrator, name_models):
        """Should serialize the value unchanged when no hops are needed."""
        result = migrator.perform_migration(name_models, NameV1(name="Ada"), "v1", "v1")

        assert result == {"name": "Ada"}

    def test_round_trip(self, migrator, name_models):
        """Should reconstruct the value through lossless transforms."""
        forward = migrator.perform_migration(
            name_models, NameV1(name="Ada Lovelace"), "v1", "v3"
        )
        backward = migrator.perform_migration(
            name_models, NameV3.model_validate(forward), "v3", "v1"
        )

        assert backward == {"name": "Ada Lovelace"}

    def test_unknown_starting_version(self, migrator, name_models):
        """Should reject an unknown starting version."""
        with pytest.raises(NoSuchModelError) as exc_info:
            migrator.perform_migration(name_models, NameV1(name="Ada"), "v9", "v1")

        assert str(exc_info.value) == "Could not find model for version 'v9'"

    def test_unknown_target_version(self, migrator, name_models):
        """Should report that no route reaches an unknown target."""
        with pytest.raises(NoMigrationRouteError) as exc_info:
            migrator.perform_migration(name_models, NameV1(name="Ada"), "v1", "v7")

        assert exc_info.value.starting_version == "v1"
        assert exc_info.value.target_version == "v7"

    def test_value_does_not_match_starting_version(self, migrator, name_models):
        """Should fail to downcast a value that is not of the starting model."""
        with pytest.raises(DowncastSettingError):
            migrator.perform_migration(name_models, NameV1(name="Ada"), "v2", "v3")

    def test_submigration_failure(self, migrator):
        """Should stop at the first failing transform."""
        models = registry_of(BrokenV1, BrokenV2)

        with pytest.raises(SubMigrationError):
            migrator.perform_migration(models, BrokenV1(), "v1", "v2")

    def test_validate_migrations(self, migrator, name_models):
        """Should accept a valid chain of real models."""
        migrator.validate_migrations(name_models)


class TestPerformFloodMigrations:
    """Test migrating a value to every version."""

    def test_from_first_version(self, migrator, name_models):
        """Should produce one sorted result per version."""
        results = migrator.perform_flood_migrations(name_models, NameV1(name="Ada Lovelace"), "v1")

        assert results == [
            MigrationResult(version="v1", value={"name": "Ada Lovelace"}),
            MigrationResult(version="v2", value={"first": "Ada", "last": "Lovelace"}),
            MigrationResult(
                version="v3", value={"first": "Ada", "last": "Lovelace", "nickname": None}
            ),
        ]

    def test_from_middle_version(self, migrator, name_models):
        """Should walk both directions from the original value."""
        results = migrator.perform_flood_migrations(
            name_models, NameV2(first="Ada", last="Lovelace"), "v2"
        )

        assert [result.version for result in results] == ["v1", "v2", "v3"]
        assert results[0].value == {"name": "Ada Lovelace"}
        assert results[2].value["nickname"] is None

    def test_single_model(self, migrator):
        """Should return only the starting value for a one-model chain."""
        models = registry_of(NameV1)

        results = migrator.perform_flood_migrations(models, NameV1(name="Ada"), "v1")

        assert results == [MigrationResult(version="v1", value={"name": "Ada"})]

    def test_unknown_starting_version(self, migrator, name_models):
        """Should reject an unknown starting version."""
        with pytest.raises(NoSuchModelError):
            migrator.perform_flood_migrations(name_models, NameV1(name="Ada"), "v9")

    def test_submigration_failure(self, migrator):
        """Should fail the whole flood when one transform fails."""
        models = registry_of(BrokenV1, BrokenV2)

        with pytest.raises(SubMigrationError):
            migrator.perform_flood_migrations(models, BrokenV1(), "v1")

    def test_result_serialization(self):
        """Should serialize results as version/value objects."""
        result = MigrationResult(version="v2", value=["a", "b"])

        assert result.model_dump(mode="json") == {"version": "v2", "value": ["a", "b"]}
