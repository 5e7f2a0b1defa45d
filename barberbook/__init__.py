"""
Barberbook
==========

Booking backend for a service business: shops, their operators and
services, and customer appointment bookings.
"""
