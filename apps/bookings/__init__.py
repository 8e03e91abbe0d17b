"""Bookings app package.

This app encapsulates the booking workflow: validating a reservation
request, attaching it to a place and the calling user, listing the
caller's bookings with their place embedded and creator-only
cancellation.
"""
