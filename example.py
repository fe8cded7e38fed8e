import calday
from calday import ExplicitSpan, FromSpan, Month, ToSpan, Year, days

print(calday.__version__)  # 0.1.0

september = Year(1999).month(Month.SEPTEMBER)

# Whole month
print(len(list(days(september))))  # 30

# From the 10th to the end of the month
print(len(list(days(september, FromSpan(10)))))  # 21

# The 10th up to, but excluding, the 20th
print(len(list(days(september, ExplicitSpan(10, 20)))))  # 10

# Slices work too
print(len(list(september.days(slice(None, 20)))))  # 19

# Walk from both ends of the same iterator
month_days = days(september, ToSpan(5))
print(next(month_days))  # 1999-09-01
print(month_days.next_back())  # 1999-09-04
print(list(month_days))  # [datetime.date(1999, 9, 2), datetime.date(1999, 9, 3)]
