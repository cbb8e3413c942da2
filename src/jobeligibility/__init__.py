"""Job eligibility evaluation over AND/OR requirement trees."""

__version__ = "0.1.0"
