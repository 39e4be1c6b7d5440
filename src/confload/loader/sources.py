"""Run pydantic-settings sources against an arbitrary model class."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from .target import overlay_model


def settings_model(model_cls: type[BaseModel], *, case_sensitive: bool) -> type[BaseSettings]:
    if issubclass(model_cls, BaseSettings):
        return model_cls

    class CLIEnvSettings(BaseSettings, model_cls):  # type: ignore[valid-type,misc]
        __doc__ = model_cls.__doc__

        model_config = SettingsConfigDict(
            case_sensitive=case_sensitive,
            cli_prog_name=model_cls.__name__,
            extra="ignore",
        )

    return CLIEnvSettings


def read_environment(target: BaseModel) -> BaseModel:
    """Validate the environment against the target's model, current values as defaults.

    Variable names are matched case-sensitively.

    Raises:
        pydantic.ValidationError: an environment value does not fit its field.
        pydantic_settings.SettingsError: an environment value could not be parsed.
    """
    return settings_model(overlay_model(target), case_sensitive=True)()
