"""Bookings app package.

This app encapsulates the booking domain: the booking model, the
availability and pricing engine, and the lifecycle services (create,
cancel, listing, housekeeping). Bookings on one slot never overlap;
this is enforced by a row lock plus a post-insert re-check inside one
transaction and, on PostgreSQL, by an exclusion constraint.
"""
