"""wall2h5p.

Converts scraped quiz and game activities into H5P content packages
that can be embedded in any H5P-capable player.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
