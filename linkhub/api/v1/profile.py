# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public profile endpoint."""

from fastapi import APIRouter

from linkhub.config import get_settings
from linkhub.schemas.profile import ProfileResponse

router = APIRouter()


@router.get("", response_model=ProfileResponse)
def get_profile() -> ProfileResponse:
    """Get the public link-in-bio profile."""
    settings = get_settings()
    return ProfileResponse(
        name=settings.profile_name,
        subtitle=settings.profile_subtitle,
        bio=settings.profile_bio,
        avatar_url=settings.profile_avatar_url,
        links=settings.profile_links,
    )
