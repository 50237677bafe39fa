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

import pytest

from staticpod.errors import InvalidInput
from staticpod.resources import component_resources


@pytest.mark.parametrize("cpu", ["250m", "1", "0", "0.5"])
def test_component_resources(cpu):
    resources = component_resources(cpu)
    assert resources.requests is not None
    assert resources.requests == {"cpu": cpu}


def test_component_resources_empty():
    resources = component_resources("")
    assert resources.requests == {}


@pytest.mark.parametrize("cpu", ["abc", "m", "250x"])
def test_component_resources_invalid(cpu):
    with pytest.raises(InvalidInput):
        component_resources(cpu)
