"""Domain models for scene and render configuration."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

PresetSpecification = Union[str, dict[str, str]]


class _ConfigurationModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class VisibilityConfiguration(_ConfigurationModel):
    """Visibility to apply to a single node."""

    visible: bool = Field(..., description="Whether the node is shown")
    recursive: bool = Field(
        default=False, description="Apply the same visibility to direct children"
    )


class RenderConfiguration(_ConfigurationModel):
    """A single render job inside a scene."""

    camera_name: str = Field(..., alias="cameraName", min_length=1)
    render_filename: str = Field(..., alias="renderFilename", min_length=1)
    presets: list[PresetSpecification] | None = Field(
        default=None, description="Preset files, global or bound to a node label"
    )
    visibilities: dict[str, VisibilityConfiguration] | None = Field(
        default=None, description="Visibility per node label"
    )

    @field_validator("presets")
    @classmethod
    def _single_node_per_preset(
        cls, presets: list[PresetSpecification] | None
    ) -> list[PresetSpecification] | None:
        for index, preset in enumerate(presets or []):
            if isinstance(preset, dict) and len(preset) != 1:
                raise ValueError(
                    f"Invalid number of keys in preset at index {index}. "
                    "Only one key is allowed"
                )
        return presets

    @field_validator("visibilities", mode="before")
    @classmethod
    def _visibility_has_parameters(cls, visibilities: object) -> object:
        if not isinstance(visibilities, dict):
            return visibilities
        for node_name, parameters in visibilities.items():
            if isinstance(parameters, dict) and not parameters:
                raise ValueError(
                    f"No parameters found for the visibility of '{node_name}'."
                )
        return visibilities


class SceneConfiguration(_ConfigurationModel):
    """A scene file and the renders to produce from it."""

    scene_path: str = Field(..., alias="scenePath", min_length=1)
    render_directory_path: str = Field(..., alias="renderDirectoryPath", min_length=1)
    overwrite: bool = Field(default=False, description="Replace existing renders")
    abort_on_error: bool = Field(
        default=False,
        alias="abortOnError",
        description="Stop the whole batch on the first failure",
    )
    interactive: bool | None = Field(
        default=None, description="Show dialogs for recoverable errors"
    )
    render_configurations: list[RenderConfiguration] = Field(
        ..., alias="renderConfigurations", min_length=1
    )


class AutodazzlerConfiguration(_ConfigurationModel):
    """Root of a configuration file."""

    scenes: list[SceneConfiguration] = Field(..., min_length=1)
    interactive: bool | None = Field(
        default=None, description="Defaults to how the configuration was chosen"
    )
    quit_automatically: bool = Field(
        default=False,
        alias="quitAutomatically",
        description="Close the host once a non-interactive batch ends",
    )

    def with_defaults(self, interactive: bool) -> AutodazzlerConfiguration:
        """Resolve the interactive flags of the configuration and its scenes.

        The root flag defaults to how the configuration path was chosen; scenes
        without their own flag are interactive.

        Args:
            interactive: Whether the configuration path was chosen by the user

        Returns:
            A copy where no ``interactive`` flag is left unset
        """
        resolved = interactive if self.interactive is None else self.interactive
        scenes = [
            scene
            if scene.interactive is not None
            else scene.model_copy(update={"interactive": True})
            for scene in self.scenes
        ]
        return self.model_copy(update={"interactive": resolved, "scenes": scenes})
