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


class InvalidInput(ValueError):
    """
    Exception class indicating invalid input arguments, such as a malformed
    resource quantity or an unknown host path type.
    """

    def __init__(self, reason):
        self.reason = reason

    def __str__(self):
        return self.reason


class ProbeAddressError(RuntimeError):
    """
    Exception class indicating that a component host name could not be
    resolved to a literal IP address usable as a probe host.
    """

    def __init__(self, hostname, reason=None):
        self.hostname = hostname
        self.reason = reason

    def __str__(self):
        msg = f"unable to resolve probe address for host {self.hostname}"
        if self.reason is not None:
            msg = msg + ": " + self.reason
        return msg
