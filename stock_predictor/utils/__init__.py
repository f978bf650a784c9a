"""
Utility functions module.

Date Semantics:
- Series and forecasts are daily; every date is a datetime.date
- Date arithmetic is done with timedelta(days=...), never by parsing strings
- "Today" is read from the wall clock only when the caller supplies no end date
"""
