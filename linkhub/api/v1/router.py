# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from linkhub.api.v1 import auth, cron, devotionals, payments, profile, users

api_router = APIRouter()

# Auth routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Public profile routes
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
api_router.include_router(
    devotionals.public_router, prefix="/devotionals", tags=["profile"]
)

# Admin routes
api_router.include_router(users.router, prefix="/admin/users", tags=["users"])
api_router.include_router(
    devotionals.router, prefix="/admin/devotionals", tags=["devotionals"]
)
api_router.include_router(payments.router, prefix="/admin/payments", tags=["payments"])

# Cron routes
api_router.include_router(cron.router, prefix="/cron", tags=["cron"])
