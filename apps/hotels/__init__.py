"""Hotels app package.

This app encapsulates the hotel management domain: hotels and their
floor plans, rooms, guests and bookings. The pure booking logic
(availability, occupancy, revenue, recent activity, room numbering and
the dashboard read model) lives in ``domain``; write workflows live in
``application``; ``infrastructure`` adapts the entity store to memory or
to the Django ORM models defined in ``models``.
"""
