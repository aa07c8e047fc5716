"""
stayhub

Booking-marketplace REST API: users, hosts, properties, amenities, bookings and reviews.
"""

__version__ = "0.1.0"
