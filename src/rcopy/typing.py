# SPDX-License-Identifier: Apache-2.0

"""Typing utils."""

import os
from collections.abc import Callable

StrOrPath = str | os.PathLike[str]

AskFunction = Callable[[str], str]
