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

from typing import Union

from kubernetes import client

from .config import MasterConfiguration
from .constants.constants import (
    PROBE_FAILURE_THRESHOLD,
    PROBE_INITIAL_DELAY_SECONDS,
    PROBE_TIMEOUT_SECONDS,
    ComponentKind,
    URIScheme,
)
from .resolver import LookupFunc, get_probe_address, lookup_ip


def component_probe(
    cfg: MasterConfiguration,
    component: Union[ComponentKind, str],
    port: int,
    path: str,
    scheme: Union[URIScheme, str],
    lookup: LookupFunc = lookup_ip,
) -> client.V1Probe:
    """
    Returns an HTTP GET liveness probe for a control-plane component.
    :param cfg: master configuration.
    :param component: component kind, or its name.
    :param port: port the component serves its health endpoint on.
    :param path: health endpoint path.
    :param scheme: HTTP or HTTPS.
    :param lookup: resolver used for host names in the etcd listen client urls.
    :return: V1Probe
    """
    return client.V1Probe(
        http_get=client.V1HTTPGetAction(
            host=get_probe_address(cfg, component, lookup=lookup),
            port=port,
            path=path,
            scheme=URIScheme(scheme).value,
        ),
        initial_delay_seconds=PROBE_INITIAL_DELAY_SECONDS,
        timeout_seconds=PROBE_TIMEOUT_SECONDS,
        failure_threshold=PROBE_FAILURE_THRESHOLD,
    )
