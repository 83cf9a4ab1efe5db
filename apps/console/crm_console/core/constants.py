"""Console constants."""

# Snooze preset clock times (local to "now")
LATER_TODAY_CUTOFF_HOUR = 14  # Before 2 PM, snooze until end of afternoon
LATER_TODAY_RETURN_HOUR = 17  # 5:00 PM
LATER_TODAY_OFFSET_HOURS = 4  # After the cutoff, now + 4 hours
TOMORROW_RETURN_HOUR = 9  # 9:00 AM
WEEKEND_RETURN_HOUR = 10  # Saturday 10:00 AM
NEXT_WEEK_RETURN_HOUR = 9  # Monday 9:00 AM

# Python weekday numbers (Monday == 0)
MONDAY = 0
SATURDAY = 5

# Filter sentinels shared by the submission and conversation filter values
FILTER_ALL = "all"
FILTER_UNASSIGNED = "unassigned"
