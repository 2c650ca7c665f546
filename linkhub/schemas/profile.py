# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public profile schemas."""

from pydantic import BaseModel

from linkhub.config import ProfileLink


class ProfileResponse(BaseModel):
    """The link-in-bio header and its links."""

    name: str
    subtitle: str | None = None
    bio: str
    avatar_url: str | None = None
    links: list[ProfileLink]
