"""
Application Layer - Booking workflows and read models.

Use cases run each operation inside one unit of work, so every check
and every write of an operation commits or rolls back together.
"""
