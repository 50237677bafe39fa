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

from typing import Any, Dict, List, Optional

import yaml
from kubernetes import client

from .constants.constants import (
    COMPONENT_LABEL_KEY,
    CONTROL_PLANE_TIER,
    CRITICAL_POD_ANNOTATION,
    POD_API_VERSION,
    POD_KIND,
    POD_NAMESPACE,
    TIER_LABEL_KEY,
)


def component_pod(
    container: client.V1Container, volumes: Optional[List[client.V1Volume]] = None
) -> client.V1Pod:
    """
    Returns the static pod running a single control-plane container.

    The pod lives in the kube-system namespace, is marked critical so the
    kubelet never evicts it, and shares the node network namespace.

    :param container: fully built container; its name names the pod.
    :param volumes: volumes backing the container mounts.
    :return: V1Pod
    """
    return client.V1Pod(
        api_version=POD_API_VERSION,
        kind=POD_KIND,
        metadata=client.V1ObjectMeta(
            name=container.name,
            namespace=POD_NAMESPACE,
            annotations={CRITICAL_POD_ANNOTATION: ""},
            labels={
                COMPONENT_LABEL_KEY: container.name,
                TIER_LABEL_KEY: CONTROL_PLANE_TIER,
            },
        ),
        spec=client.V1PodSpec(
            containers=[container],
            host_network=True,
            volumes=list(volumes or []),
        ),
    )


def pod_to_dict(pod: client.V1Pod) -> Dict[str, Any]:
    """Returns the manifest of pod as a dict keyed the way the API server expects."""
    return client.ApiClient().sanitize_for_serialization(pod)


def pod_to_yaml(pod: client.V1Pod) -> str:
    return yaml.safe_dump(pod_to_dict(pod), default_flow_style=False)
