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

import yaml
from kubernetes.client import (V1Container, V1ObjectMeta, V1Pod, V1PodSpec)

from staticpod.config import MasterConfiguration
from staticpod.constants.constants import ComponentKind, HostPathType, URIScheme
from staticpod.pod import component_pod, pod_to_dict, pod_to_yaml
from staticpod.probe import component_probe
from staticpod.resources import component_resources
from staticpod.utils.utils import get_extra_parameters
from staticpod.volumes import new_volume, new_volume_mount


def test_component_pod():
    expected = V1Pod(
        api_version="v1",
        kind="Pod",
        metadata=V1ObjectMeta(
            name="foo",
            namespace="kube-system",
            annotations={"scheduler.alpha.kubernetes.io/critical-pod": ""},
            labels={"component": "foo", "tier": "control-plane"},
        ),
        spec=V1PodSpec(
            containers=[V1Container(name="foo")],
            host_network=True,
            volumes=[],
        ),
    )
    assert component_pod(V1Container(name="foo"), []) == expected


def test_component_pod_default_volumes():
    pod = component_pod(V1Container(name="foo"))
    assert pod.spec.volumes == []
    assert len(pod.spec.containers) == 1


def test_component_pod_volumes_copied():
    volumes = [new_volume("k8s", "/etc/kubernetes", "DirectoryOrCreate")]
    pod = component_pod(V1Container(name="kube-apiserver"), volumes)
    volumes.append(new_volume("other", "/tmp"))
    assert [v.name for v in pod.spec.volumes] == ["k8s"]


def test_pod_to_dict():
    container = V1Container(
        name="etcd",
        volume_mounts=[new_volume_mount("etcd-data", "/var/lib/etcd")],
    )
    pod = component_pod(container, [new_volume("etcd-data", "/var/lib/etcd", "DirectoryOrCreate")])
    manifest = pod_to_dict(pod)
    assert manifest["apiVersion"] == "v1"
    assert manifest["kind"] == "Pod"
    assert manifest["metadata"]["namespace"] == "kube-system"
    assert manifest["spec"]["hostNetwork"] is True
    assert manifest["spec"]["volumes"] == [
        {"name": "etcd-data", "hostPath": {"path": "/var/lib/etcd", "type": "DirectoryOrCreate"}}
    ]
    assert manifest["spec"]["containers"][0]["volumeMounts"] == [
        {"name": "etcd-data", "mountPath": "/var/lib/etcd", "readOnly": False}
    ]


def test_pod_to_yaml():
    pod = component_pod(V1Container(name="foo"))
    assert yaml.safe_load(pod_to_yaml(pod)) == pod_to_dict(pod)


def test_etcd_static_pod():
    cfg = MasterConfiguration(
        etcd={"extraArgs": {"listen-client-urls": "http://10.0.0.1:2379", "data-dir": "/var/lib/etcd"}}
    )
    container = V1Container(
        name="etcd",
        image="registry.k8s.io/etcd:3.1.10",
        command=["etcd"] + sorted(get_extra_parameters(cfg.etcd.arguments(), {"data-dir": "/data"})),
        liveness_probe=component_probe(cfg, ComponentKind.ETCD, 2379, "/health", URIScheme.HTTP),
        resources=component_resources("250m"),
        volume_mounts=[new_volume_mount("etcd", "/var/lib/etcd")],
    )
    pod = component_pod(container, [new_volume("etcd", "/var/lib/etcd", HostPathType.DIRECTORY_OR_CREATE)])

    manifest = pod_to_dict(pod)
    spec = manifest["spec"]["containers"][0]
    assert manifest["metadata"]["labels"] == {"component": "etcd", "tier": "control-plane"}
    assert spec["command"] == [
        "etcd",
        "--data-dir=/var/lib/etcd",
        "--listen-client-urls=http://10.0.0.1:2379",
    ]
    assert spec["livenessProbe"]["httpGet"]["host"] == "10.0.0.1"
    assert spec["resources"] == {"requests": {"cpu": "250m"}}
    assert spec["volumeMounts"][0]["name"] == manifest["spec"]["volumes"][0]["name"]
