"""Domain Entities - Objects with identity."""

from .user_profile import UserProfile
from .job_listing import JobListing
from .job_application import JobApplication
from .booking import Booking

__all__ = ["UserProfile", "JobListing", "JobApplication", "Booking"]
