# Copyright 2026 The Staticpod Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration classes for the control-plane components."""

from typing import Any, ClassVar, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic import field_validator, model_validator
from pydantic.alias_generators import to_camel

from .constants.constants import (
    ADDRESS_ARG,
    DEFAULT_API_SERVER_BIND_PORT,
    ETCD_LISTEN_CLIENT_URLS_ARG,
    ComponentKind,
)
from .errors import InvalidInput
from .logging import logger


class ComponentConfig(BaseModel):
    """Base configuration of a control-plane component.

    Well-known flags are exposed as named fields, every other flag is kept
    in ``extra_args`` and passed through untouched. A well-known flag given
    inside ``extraArgs`` is lifted into its named field unless the field is
    set explicitly.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    # field name -> command line flag name
    well_known_args: ClassVar[Dict[str, str]] = {}

    extra_args: Dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def lift_well_known_args(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        extra_key = "extraArgs" if "extraArgs" in data else "extra_args"
        extra_args = data.get(extra_key)
        if not extra_args or not cls.well_known_args:
            return data
        data = dict(data)
        extra_args = dict(extra_args)
        for field_name, flag in cls.well_known_args.items():
            if flag not in extra_args:
                continue
            value = extra_args.pop(flag)
            if data.get(field_name) is None and data.get(to_camel(field_name)) is None:
                data[field_name] = value if value is None else str(value)
        data[extra_key] = extra_args
        return data

    @field_validator("extra_args", mode="before")
    @classmethod
    def stringify_extra_args(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        args = {}
        for key, arg in value.items():
            if isinstance(arg, bool):
                arg = "true" if arg else "false"
            elif arg is None:
                arg = ""
            args[str(key)] = str(arg)
        return args

    def arguments(self) -> Dict[str, str]:
        """Returns the full flag map, well-known flags included."""
        args = dict(self.extra_args)
        for field_name, flag in self.well_known_args.items():
            value = getattr(self, field_name)
            if value is not None:
                args[flag] = str(value)
        return args


class APIServerConfig(ComponentConfig):
    well_known_args: ClassVar[Dict[str, str]] = {
        "advertise_address": "advertise-address"
    }

    advertise_address: Optional[str] = None
    bind_port: int = DEFAULT_API_SERVER_BIND_PORT


class SchedulerConfig(ComponentConfig):
    well_known_args: ClassVar[Dict[str, str]] = {"address": ADDRESS_ARG}

    address: Optional[str] = None


class ControllerManagerConfig(ComponentConfig):
    well_known_args: ClassVar[Dict[str, str]] = {"address": ADDRESS_ARG}

    address: Optional[str] = None


class EtcdConfig(ComponentConfig):
    well_known_args: ClassVar[Dict[str, str]] = {
        "listen_client_urls": ETCD_LISTEN_CLIENT_URLS_ARG
    }

    listen_client_urls: Optional[str] = None


class MasterConfiguration(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    api_server: APIServerConfig = Field(default_factory=APIServerConfig)
    scheduler: SchedulerConfig = Field(default_factory=SchedulerConfig)
    controller_manager: ControllerManagerConfig = Field(
        default_factory=ControllerManagerConfig
    )
    etcd: EtcdConfig = Field(default_factory=EtcdConfig)

    def component(self, kind: Union[ComponentKind, str]) -> ComponentConfig:
        """Returns the configuration record of the given component kind."""
        try:
            kind = ComponentKind(kind)
        except ValueError:
            raise InvalidInput(f"unknown control-plane component: {kind}")
        if kind is ComponentKind.KUBE_APISERVER:
            return self.api_server
        if kind is ComponentKind.KUBE_SCHEDULER:
            return self.scheduler
        if kind is ComponentKind.KUBE_CONTROLLER_MANAGER:
            return self.controller_manager
        if kind is ComponentKind.ETCD:
            return self.etcd
        raise InvalidInput(f"unknown control-plane component: {kind}")


def configuration_from_dict(data: Optional[Dict]) -> MasterConfiguration:
    """
    Builds a MasterConfiguration from a plain dict.
    :param data: dict using the camelCase or snake_case field names.
    :return: validated MasterConfiguration
    """
    try:
        return MasterConfiguration.model_validate(data or {})
    except ValidationError as e:
        raise InvalidInput(f"invalid configuration: {e}")


def load_configuration(path: str) -> MasterConfiguration:
    """
    Loads a MasterConfiguration from a YAML file.
    :param path: path of the YAML configuration file.
    :return: validated MasterConfiguration
    """
    logger.debug("Loading configuration from %s", path)
    with open(path) as file:
        try:
            data = yaml.safe_load(file)
        except yaml.YAMLError as e:
            raise InvalidInput(f"invalid configuration file {path}: {e}")
    if data is not None and not isinstance(data, dict):
        raise InvalidInput(f"invalid configuration file {path}: expected a mapping")
    return configuration_from_dict(data)
