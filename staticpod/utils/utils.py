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

from typing import Dict, List, Optional


def get_extra_parameters(
    overrides: Optional[Dict[str, str]], defaults: Optional[Dict[str, str]]
) -> List[str]:
    """
    Merges default and override flag maps into a list of command line flags.
    Overrides win over defaults, and every key appears exactly once.
    :param overrides: user supplied flags.
    :param defaults: component default flags.
    :return: list of "--key=value" strings
    """
    args = dict(defaults or {})
    args.update(overrides or {})
    return [f"--{key}={value}" for key, value in args.items()]
