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

from typing import Optional, Union

from kubernetes import client

from .constants.constants import HostPathType
from .errors import InvalidInput


def new_volume(
    name: str, path: str, path_type: Optional[Union[HostPathType, str]] = None
) -> client.V1Volume:
    """Returns a host path volume named name for path."""
    if path_type is not None:
        try:
            path_type = HostPathType(path_type).value
        except ValueError:
            raise InvalidInput(f"invalid host path type: {path_type}")
    return client.V1Volume(
        name=name,
        host_path=client.V1HostPathVolumeSource(path=path, type=path_type),
    )


def new_volume_mount(name: str, path: str, read_only: bool = False) -> client.V1VolumeMount:
    """Returns a mount of the volume named name at path."""
    return client.V1VolumeMount(name=name, mount_path=path, read_only=read_only)
