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

import os
from enum import Enum

STATICPOD_LOGLEVEL = os.environ.get("STATICPOD_LOGLEVEL", "INFO").upper()

# K8S pod constants
POD_API_VERSION = "v1"
POD_KIND = "Pod"
POD_NAMESPACE = "kube-system"
CONTROL_PLANE_TIER = "control-plane"
COMPONENT_LABEL_KEY = "component"
TIER_LABEL_KEY = "tier"
CRITICAL_POD_ANNOTATION = "scheduler.alpha.kubernetes.io/critical-pod"

# Probe constants
LOOPBACK_ADDRESS = "127.0.0.1"
PROBE_INITIAL_DELAY_SECONDS = 15
PROBE_TIMEOUT_SECONDS = 15
PROBE_FAILURE_THRESHOLD = 8

# Well-known extra argument keys
ADDRESS_ARG = "address"
ETCD_LISTEN_CLIENT_URLS_ARG = "listen-client-urls"

# Resource constants
CPU_RESOURCE_NAME = "cpu"

DEFAULT_API_SERVER_BIND_PORT = 6443


class ComponentKind(str, Enum):
    KUBE_APISERVER = "kube-apiserver"
    KUBE_SCHEDULER = "kube-scheduler"
    KUBE_CONTROLLER_MANAGER = "kube-controller-manager"
    ETCD = "etcd"


class URIScheme(str, Enum):
    HTTP = "HTTP"
    HTTPS = "HTTPS"


class HostPathType(str, Enum):
    UNSET = ""
    DIRECTORY_OR_CREATE = "DirectoryOrCreate"
    DIRECTORY = "Directory"
    FILE_OR_CREATE = "FileOrCreate"
    FILE = "File"
    SOCKET = "Socket"
    CHAR_DEVICE = "CharDevice"
    BLOCK_DEVICE = "BlockDevice"
