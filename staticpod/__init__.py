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

from __future__ import absolute_import

from .constants import constants
from .constants.constants import ComponentKind, HostPathType, URIScheme
from .config import (
    APIServerConfig,
    ControllerManagerConfig,
    EtcdConfig,
    MasterConfiguration,
    SchedulerConfig,
    configuration_from_dict,
    load_configuration,
)
from .errors import InvalidInput, ProbeAddressError
from .logging import configure_logging, logger
from .resolver import get_probe_address, lookup_ip
from .probe import component_probe
from .resources import component_resources
from .volumes import new_volume, new_volume_mount
from .pod import component_pod, pod_to_dict, pod_to_yaml
from .utils.utils import get_extra_parameters
