"""Slots app package.

Parking slots listed by residents (or shared slots managed by community
admins), their pricing mode and lifecycle. Slots are soft-deleted only.
"""
