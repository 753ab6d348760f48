#!/usr/bin/env python3
"""Example settings extension for a message of the day.

Two versions of the setting are provided:
- v1 models the message as a single string
- v2 models it as a list of words, none of which contain whitespace

    motd-settings-extension proto1 migrate \\
        --value '"hello there"' --from-version v1 --target-version v2
"""

import sys
from typing import Any, ClassVar

from pydantic import RootModel

from settingsdk.extension import LinearMigratorExtensionBuilder, SettingsExtension
from settingsdk.helper import HelperDef, template_helper
from settingsdk.migrate import LinearlyMigrateable
from settingsdk.model import Complete, GenerateResult


@template_helper
def exclaim(message: str) -> str:
    return message + "!"


@template_helper
def exclaim_loudly(message: str) -> str:
    return message + "!!"


@template_helper
def question(one: str, two: str) -> str:
    return f"{one}? {two}??"


class MotdV1(RootModel[str | None], LinearlyMigrateable):
    """Message of the day as a single string."""

    root: str | None = None

    version: ClassVar[str] = "v1"
    migrates_forward_to: ClassVar[str | None] = "v2"

    @classmethod
    def generate(
        cls, existing_partial: "MotdV1 | None", dependent_settings: Any | None
    ) -> GenerateResult:
        return Complete(existing_partial if existing_partial is not None else cls())

    @classmethod
    def template_helpers(cls) -> dict[str, HelperDef]:
        return {"exclaim": exclaim}

    def migrate_forward(self) -> "MotdV2":
        """Split the message into words."""
        return MotdV2(self.root.split() if self.root else [])


class MotdV2(RootModel[list[str]], LinearlyMigrateable):
    """Message of the day as a list of words."""

    root: list[str] = []

    version: ClassVar[str] = "v2"
    migrates_backward_to: ClassVar[str | None] = "v1"

    @classmethod
    def generate(
        cls, existing_partial: "MotdV2 | None", dependent_settings: Any | None
    ) -> GenerateResult:
        return Complete(existing_partial if existing_partial is not None else cls())

    @classmethod
    def validate_value(cls, value: "MotdV2", validated_settings: Any | None) -> None:
        for word in value.root:
            if any(char.isspace() for char in word):
                raise ValueError(f"motd word {word!r} contains whitespace")

    @classmethod
    def template_helpers(cls) -> dict[str, HelperDef]:
        return {"exclaim": exclaim_loudly, "question": question}

    def migrate_backward(self) -> MotdV1:
        """Join the words with single spaces; no words means no message."""
        return MotdV1(" ".join(self.root) if self.root else None)


def motd_settings_extension() -> SettingsExtension:
    """Build the motd settings extension."""
    return (
        LinearMigratorExtensionBuilder.with_name("motd")
        .with_models([MotdV1, MotdV2])
        .build()
    )


def main() -> None:
    """Entry point for the motd settings extension."""
    sys.exit(motd_settings_extension().run())


if __name__ == "__main__":
    main()
