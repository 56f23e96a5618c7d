# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""User account service: sign-up, cookie-session login, profile, logout."""

__version__ = "0.1.0"
