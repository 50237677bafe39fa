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

from kubernetes import client
from kubernetes.utils import parse_quantity

from .constants.constants import CPU_RESOURCE_NAME
from .errors import InvalidInput


def component_resources(cpu: str) -> client.V1ResourceRequirements:
    """
    Returns the resource requirements of a control-plane container.
    :param cpu: CPU quantity to request, e.g. "250m". Empty requests nothing.
    :return: V1ResourceRequirements whose requests are never None
    """
    requests = {}
    if cpu:
        try:
            parse_quantity(cpu)
        except ValueError as e:
            raise InvalidInput(f"invalid cpu quantity {cpu!r}: {e}")
        requests[CPU_RESOURCE_NAME] = cpu
    return client.V1ResourceRequirements(requests=requests)
