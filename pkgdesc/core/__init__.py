# SPDX-License-Identifier: MIT
"""Target descriptors, dependencies and their canonical serialization."""
