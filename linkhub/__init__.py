# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Linkhub: link-in-bio profile and admin back-office."""

__version__ = "0.1.0"
