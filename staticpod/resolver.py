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

import ipaddress
import socket
from typing import Callable, List, Optional, Union
from urllib.parse import urlsplit

from .config import MasterConfiguration
from .constants.constants import LOOPBACK_ADDRESS, ComponentKind
from .errors import InvalidInput, ProbeAddressError
from .logging import logger

LookupFunc = Callable[[str], List[str]]


def lookup_ip(host: str) -> List[str]:
    """Resolves host with the system resolver.

    Returns the unique addresses in the order the resolver returned them.
    Raises OSError (socket.gaierror) when the lookup fails.
    """
    addrs = []
    for family, _, _, _, sockaddr in socket.getaddrinfo(host, None):
        if family not in (socket.AF_INET, socket.AF_INET6):
            continue
        addr = sockaddr[0]
        if addr not in addrs:
            addrs.append(addr)
    return addrs


def parse_ip(value: str) -> Optional[str]:
    """Returns the canonical form of value if it is a literal IP, else None."""
    try:
        ip = ipaddress.ip_address(value)
    except ValueError:
        return None
    if ip.version == 6 and ip.ipv4_mapped is not None:
        return str(ip.ipv4_mapped)
    return str(ip)


def select_address(addrs: List[str]) -> Optional[str]:
    """Picks the first IPv4 address, falling back to the first IPv6 address."""
    ipv6 = None
    for addr in addrs:
        try:
            ip = ipaddress.ip_address(addr.split("%", 1)[0])
        except ValueError:
            continue
        if ip.version == 4:
            return str(ip)
        if ip.ipv4_mapped is not None:
            return str(ip.ipv4_mapped)
        if ipv6 is None:
            ipv6 = str(ip)
    return ipv6


def _etcd_probe_address(listen_client_urls: Optional[str], lookup: LookupFunc) -> str:
    if listen_client_urls is None:
        return LOOPBACK_ADDRESS
    # Only the first of several listen urls is probed.
    first_url = listen_client_urls.split(",")[0].strip()
    try:
        hostname = urlsplit(first_url).hostname
    except ValueError:
        hostname = None
    if not hostname:
        return LOOPBACK_ADDRESS

    ip = parse_ip(hostname)
    if ip is not None:
        return ip

    logger.debug("Resolving etcd listen client host %s", hostname)
    try:
        addrs = lookup(hostname)
    except OSError as e:
        logger.debug("Lookup of %s failed, using %s: %s", hostname, LOOPBACK_ADDRESS, e)
        return LOOPBACK_ADDRESS
    addr = select_address(addrs)
    if addr is None:
        raise ProbeAddressError(hostname, "lookup returned no usable address")
    logger.debug("Resolved %s to %s", hostname, addr)
    return addr


def get_probe_address(
    cfg: MasterConfiguration,
    component: Union[ComponentKind, str],
    lookup: LookupFunc = lookup_ip,
) -> str:
    """
    Returns the literal IP address a liveness probe of the component should target.
    :param cfg: master configuration.
    :param component: component kind, or its name.
    :param lookup: resolver used for host names in the etcd listen client urls.
    :return: IP address string
    """
    try:
        kind = ComponentKind(component)
    except ValueError:
        raise InvalidInput(f"unknown control-plane component: {component}")

    if kind is ComponentKind.KUBE_APISERVER:
        return cfg.api_server.advertise_address or LOOPBACK_ADDRESS
    if kind is ComponentKind.KUBE_SCHEDULER:
        return cfg.scheduler.address or LOOPBACK_ADDRESS
    if kind is ComponentKind.KUBE_CONTROLLER_MANAGER:
        return cfg.controller_manager.address or LOOPBACK_ADDRESS
    if kind is ComponentKind.ETCD:
        return _etcd_probe_address(cfg.etcd.listen_client_urls, lookup)
    raise InvalidInput(f"unknown control-plane component: {component}")
