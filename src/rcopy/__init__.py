# SPDX-License-Identifier: Apache-2.0

"""Copy files and directory trees."""

from rcopy.version import VERSION as __version__
